"""Allow ``python -m paritybits``."""

from paritybits.cli import main

if __name__ == "__main__":
    main()
