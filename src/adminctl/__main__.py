"""Entry point for 'python -m adminctl' command."""

from adminctl.cli import main

if __name__ == "__main__":
    main()
