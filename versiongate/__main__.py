"""Allow ``python -m versiongate``."""

from versiongate.cli import main

if __name__ == '__main__':
    main()
