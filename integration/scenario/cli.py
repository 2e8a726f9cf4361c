"""
LibCirc demo runner.

Usage:
    libcirc-demo
    libcirc-demo --config library.json --log-level INFO
    python scripts/run_scenario.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from core.config.loader import ConfigLoadError, load_config_file
from core.config.rules import DEFAULT_CONFIG
from core.state.exceptions import LibraryEngineError
from integration.scenario import DEMO_SCENARIO, run_scenario
from projections.reporting import ReportWriter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the library circulation demo scenario.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON circulation config (default: built-in 3 titles / 2 classes)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG
    if args.config:
        try:
            config = load_config_file(args.config)
        except ConfigLoadError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    writer = ReportWriter(stream=sys.stdout, config=config)
    try:
        run_scenario(DEMO_SCENARIO, config=config, writer=writer)
    except LibraryEngineError as exc:
        # The demo script names titles 1-3 and classes 1-2.
        print(f"error: config does not fit the demo scenario: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
