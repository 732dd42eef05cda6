# SPDX-License-Identifier: MIT
"""Package entry point — run stylegate via `python -m stylegate`."""

from stylegate.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
