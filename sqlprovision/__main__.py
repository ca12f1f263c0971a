"""Module entrypoint for running sqlprovision as ``python -m sqlprovision``."""

from __future__ import annotations

from sqlprovision.cli import main


if __name__ == "__main__":
    main()
