"""Main entry point for wotd."""

import sys

from loguru import logger

from wotd.cli import create_parser
from wotd.core import Config, load_config
from wotd.processing import run_pipeline
from wotd.utils.constants import Constants
from wotd.utils.logging import setup_logger


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Default words: {config.words_url}")
        logger.info(f"  Custom words: {config.custom_words_path}")
        logger.info(f"  Dictionary: {config.dictionary_url}")
        if config.today:
            logger.info(f"  Date: {config.today.isoformat()}")
        if config.width:
            logger.info(f"  Width: {config.width}")
        logger.info("")


def _log_failure(config: Config, e: BaseException) -> None:
    """Report a fatal error as one line; tracebacks only in debug mode."""
    if config.debug:
        logger.opt(exception=e).error(f"Error: {e}")
    else:
        logger.error(f"\nError: {e}\n")


def _run_pipeline_with_error_handling(config: Config) -> int:
    """Run the pipeline, turning fatal errors into a single message and exit code."""
    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return Constants.EXIT_INTERRUPTED
    except Exception as e:  # pylint: disable=broad-exception-caught
        _log_failure(config, e)
        return Constants.EXIT_FAILURE
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_config_summary(config)

    return _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    sys.exit(main())
