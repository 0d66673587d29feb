import logging
import sys


def setup_logging(level: str | int = "INFO", stream=None) -> logging.Logger:
    """
    Configure logging for the command line tool and the API.

    Sets up logging to stdout with timestamps, log levels, and module names.
    Calling it again only adjusts the level. The command line tool passes
    stderr so log lines never mix with the printed route.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    logging.getLogger().setLevel(level)

    # Reduce HTTP client noise in logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger("routefinder")
