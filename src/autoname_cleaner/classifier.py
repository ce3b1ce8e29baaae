"""Recognition of runtime-generated ``adjective_surname`` container names."""

import re
from typing import AbstractSet, Iterable, Optional

from autoname_cleaner.config import Settings
from autoname_cleaner.names_dictionary import ADJECTIVES, SURNAMES, is_excluded_pair

# Two lowercase alphabetic tokens joined by one underscore. The second token may
# carry the digit suffix the generator appends after a name collision.
AUTO_NAME_PATTERN = re.compile(r"(?P<adjective>[a-z]+)_(?P<surname>[a-z]+)(?P<suffix>[0-9]*)")


class NameClassifier:
    """
    Decides whether a container name was generated by the runtime.

    With a dictionary, both tokens must come from the runtime's word lists.
    Without one, only the structural shape is checked. Anything ambiguous is
    treated as an operator-chosen name.
    """

    def __init__(
        self,
        adjectives: Optional[AbstractSet[str]] = ADJECTIVES,
        surnames: Optional[AbstractSet[str]] = SURNAMES,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            adjectives: Accepted first tokens, or None to skip dictionary checks
            surnames: Accepted second tokens, or None to skip dictionary checks
        """
        if (adjectives is None) != (surnames is None):
            raise ValueError("adjectives and surnames must both be given or both be None")
        self.adjectives = adjectives
        self.surnames = surnames

    @property
    def uses_dictionary(self) -> bool:
        return self.adjectives is not None

    @classmethod
    def from_settings(cls, settings: Settings) -> "NameClassifier":
        """
        Build a classifier from application settings.

        Args:
            settings: Application settings

        Returns:
            NameClassifier instance
        """
        if not settings.use_name_dictionary:
            return cls(adjectives=None, surnames=None)
        return cls(
            adjectives=_extend(ADJECTIVES, settings.extra_adjectives_list),
            surnames=_extend(SURNAMES, settings.extra_surnames_list),
        )

    def is_auto_generated(self, name: str) -> bool:
        """
        Check whether a name matches the runtime's default naming scheme.

        Args:
            name: Container name without the leading '/'

        Returns:
            True if the name looks runtime-generated
        """
        match = AUTO_NAME_PATTERN.fullmatch(name)
        if match is None:
            return False
        if not self.uses_dictionary:
            return True

        adjective = match.group("adjective")
        surname = match.group("surname")
        if is_excluded_pair(adjective, surname):
            return False
        return adjective in self.adjectives and surname in self.surnames


def _extend(words: AbstractSet[str], extra: Iterable[str]) -> frozenset[str]:
    return frozenset(words).union(extra)


_default_classifier = NameClassifier()


def is_auto_generated_name(name: str) -> bool:
    """Check a name against the built-in Docker word lists."""
    return _default_classifier.is_auto_generated(name)
