"""Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this only installs the
root handler and level once at startup.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the root logger.

    Calling it again only updates the level, so reloads do not duplicate
    output.

    Args:
        level: Level name such as "DEBUG" or "INFO"

    Returns:
        The root logger
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_wms_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._wms_handler = True
        root.addHandler(handler)

    return root
