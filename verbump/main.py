"""verbump entry point.

Opens or refreshes the version bump pull request from head-branch to
base-branch. Inputs come from INPUT_* env (workflow runner) or a YAML
config. Usage: verbump [--config PATH] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from verbump.adapters.base import GitPlatformError
from verbump.config import load_config
from verbump.errors import ConfigError, VerbumpError
from verbump.logging import setup_logging
from verbump.outputs import report_failure
from verbump.runner import run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="verbump",
        description="Create or update the version bump pull request between two branches",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("verbump.yaml"),
        help="Path to YAML config file (default: verbump.yaml, optional)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run once; 0 on success, 1 on a fatal error."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging()
        logging.getLogger("verbump").error("%s", e)
        report_failure(str(e))
        return 1

    setup_logging(config.logging)
    log = logging.getLogger("verbump.main")

    if args.check:
        print(
            "Config OK:",
            config.repository,
            f"{config.inputs.head_branch} -> {config.inputs.base_branch}",
        )
        return 0

    try:
        run(config)
    except (VerbumpError, GitPlatformError) as e:
        log.error("%s", e)
        report_failure(str(e))
        return 1
    except Exception as e:
        log.exception("Fatal error: %s", e)
        report_failure(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
