"""Unit tests for logger setup."""

from loguru import logger

from wotd.utils.logging import setup_logger


class TestSetupLogger:
    """Test log level selection."""

    def test_default_hides_info(self, capsys) -> None:
        """Without flags only warnings and errors reach stderr."""
        setup_logger()
        logger.info("hidden detail")
        logger.warning("visible warning")
        err = capsys.readouterr().err
        assert "visible warning" in err and "hidden detail" not in err

    def test_verbose_shows_info(self, capsys) -> None:
        """Verbose mode shows informational messages."""
        setup_logger(verbose=True)
        logger.info("pool loaded")
        assert "pool loaded" in capsys.readouterr().err

    def test_debug_shows_debug(self, capsys) -> None:
        """Debug mode shows debug messages with their level."""
        setup_logger(debug=True)
        logger.debug("GET something")
        assert "DEBUG" in capsys.readouterr().err
