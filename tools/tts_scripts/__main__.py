#!/usr/bin/env python3
"""Entry point for running as `python -m tts_scripts`."""

from tts_scripts.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
