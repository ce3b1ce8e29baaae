"""Per-invocation context shared by every cleanup operation."""

import asyncio
import signal
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, TypeVar

from autoname_cleaner.classifier import NameClassifier
from autoname_cleaner.config import Settings
from autoname_cleaner.runtime.base import RuntimeClient
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.audit_logger import AuditLogger
from autoname_cleaner.utils.exceptions import OperationCancelledError

logger = get_logger(__name__)

T = TypeVar("T")


def run_detached(func: Callable[..., T], *args: Any, **kwargs: Any) -> "asyncio.Future[T]":
    """
    Run a blocking callable in a daemon thread.

    The thread never delays process exit, so a call that is abandoned while
    blocked on the runtime is simply left behind.

    Args:
        func: Blocking callable
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        Future resolved on the running loop with func's result or exception
    """
    loop = asyncio.get_running_loop()
    future: "asyncio.Future[T]" = loop.create_future()

    def resolve(setter: Callable[[Any], None], value: Any) -> None:
        if not future.done():
            setter(value)

    def target() -> None:
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            delivery = (future.set_exception, e)
        else:
            delivery = (future.set_result, result)
        try:
            loop.call_soon_threadsafe(resolve, *delivery)
        except RuntimeError:
            logger.debug(
                "Event loop closed before a blocking call returned",
                extra={"call": getattr(func, "__name__", repr(func))},
            )

    threading.Thread(target=target, name="autoname-runtime-call", daemon=True).start()
    return future


@dataclass
class CleanupContext:
    """
    Everything one cleanup run needs: the runtime client, settings, the name
    classifier, the audit log and a cancellation signal.

    Blocking runtime calls go through :meth:`call`, which runs them in a daemon
    thread and abandons them as soon as :meth:`cancel` is invoked. While
    :meth:`cancel_on_interrupt` is active, SIGINT invokes :meth:`cancel`.
    """

    runtime: RuntimeClient
    settings: Settings
    classifier: NameClassifier = field(default_factory=NameClassifier)
    audit: AuditLogger = field(default_factory=AuditLogger)
    _cancel_event: asyncio.Event = field(default_factory=asyncio.Event, init=False, repr=False)

    @classmethod
    def create(cls, runtime: RuntimeClient, settings: Settings) -> "CleanupContext":
        """
        Build a context configured from settings.

        Args:
            runtime: Connected runtime client
            settings: Application settings

        Returns:
            CleanupContext instance
        """
        return cls(
            runtime=runtime,
            settings=settings,
            classifier=NameClassifier.from_settings(settings),
            audit=AuditLogger(enabled=settings.audit_enabled),
        )

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """Signal every pending and future runtime call to fail fast."""
        if not self.cancelled:
            logger.info("Cleanup context cancelled")
        self._cancel_event.set()

    async def call(self, operation: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """
        Run a blocking runtime call without blocking the event loop.

        Args:
            operation: Short description used in cancellation errors
            func: Blocking callable
            *args: Positional arguments for func
            **kwargs: Keyword arguments for func

        Returns:
            Whatever func returns

        Raises:
            OperationCancelledError: If the context is or becomes cancelled first
        """
        if self.cancelled:
            raise OperationCancelledError(operation)

        work = run_detached(func, *args, **kwargs)
        waiter = asyncio.ensure_future(self._cancel_event.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()

        # A call that finished together with the cancellation still counts.
        if work.done():
            return work.result()

        # The thread cannot be interrupted; its result is discarded.
        work.cancel()
        raise OperationCancelledError(operation)

    @contextmanager
    def cancel_on_interrupt(self) -> Iterator[None]:
        """
        Turn SIGINT into :meth:`cancel` for the duration of the block.

        Must be entered from a coroutine running on the main thread. Where the
        loop cannot handle signals, SIGINT keeps its previous behaviour.
        """
        loop = asyncio.get_running_loop()
        previous = signal.getsignal(signal.SIGINT)
        try:
            loop.add_signal_handler(signal.SIGINT, self.cancel)
        except (NotImplementedError, RuntimeError) as e:
            logger.debug("SIGINT not routed to cancellation", extra={"error": str(e)})
            installed = False
        else:
            installed = True

        try:
            yield
        finally:
            if installed:
                loop.remove_signal_handler(signal.SIGINT)
                if previous is not None:
                    signal.signal(signal.SIGINT, previous)
