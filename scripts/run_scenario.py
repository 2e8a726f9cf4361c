"""
Manual runner for the circulation demo scenario.

Usage:
    python scripts/run_scenario.py
    python scripts/run_scenario.py --config library.json --log-level INFO
"""

from __future__ import annotations

import sys

from integration.scenario.cli import main


if __name__ == "__main__":
    sys.exit(main())
