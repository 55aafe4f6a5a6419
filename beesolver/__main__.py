"""Main entry point for the beesolver package."""

import sys

from loguru import logger

from beesolver.cli import create_parser, run_interactive
from beesolver.core import BeeSolverError, load_config
from beesolver.processing import run_pipeline, write_reports
from beesolver.utils.logging import setup_logger


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Logging is needed before config loading so config errors are reported
    setup_logger(verbose=args.verbose, debug=args.debug)

    try:
        config = load_config(args.config, args, parser)
    except (BeeSolverError, OSError):
        return 1

    try:
        setup_logger(verbose=config.verbose, debug=config.debug, log_file=config.log_file)
    except OSError as e:
        logger.error(f"✗ Cannot open log file {config.log_file}: {e}")
        return 1

    if config.verbose:
        logger.info("=" * 60)
        logger.info("BeeSolver - Spelling Bee Word Finder")
        logger.info("=" * 60)
        logger.info("")

    interactive = config.interactive or config.letters is None

    try:
        if interactive:
            puzzle, result = run_interactive(config)
            write_reports(config, puzzle, result)
        else:
            run_pipeline(config)
    except BeeSolverError as e:
        logger.error(f"✗ {e}")
        return 1
    except EOFError:
        logger.warning("")
        logger.warning("⚠️  Input ended before the session finished")
        return 1
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
