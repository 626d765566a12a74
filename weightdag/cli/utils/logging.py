import logging
import sys

logger = logging.getLogger("weightdag")

_DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool):
    """
    Route weightdag log records to stdout; verbose records only in debug mode.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if logger.hasHandlers():
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if debug else "%(message)s"))
    logger.addHandler(handler)
