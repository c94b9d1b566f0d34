"""Module entrypoint for running exewhich as ``python -m exewhich``."""

from __future__ import annotations

from exewhich.cli import main


if __name__ == "__main__":
    main()
