"""Module entrypoint for running FuzzyScorer as ``python -m fuzzyscorer``."""

from __future__ import annotations

from fuzzyscorer.cli import main


if __name__ == "__main__":
    main()
