"""Package entry point for ``python -m cleansrt``."""

from cleansrt.cli import main

if __name__ == "__main__":
    main()
