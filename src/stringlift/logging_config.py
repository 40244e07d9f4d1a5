import sys
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False


def setup_logging(level="INFO", suppress_console=False, force=False):
    """
    Configures the global logger.

    Only a console sink is installed. The first call wins unless ``force``
    is set, so library imports never clobber a level chosen by the CLI or
    by the test suite.

    Args:
        level: Logging level (default: INFO)
        suppress_console: If True, no sink is installed at all.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_configured

    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )


# Configure the logger on import
setup_logging()
