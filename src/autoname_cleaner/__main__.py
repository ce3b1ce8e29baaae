"""Allow ``python -m autoname_cleaner``."""

from autoname_cleaner.cli import main

if __name__ == "__main__":
    main()
