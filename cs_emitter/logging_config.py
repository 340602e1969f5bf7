"""Logging setup shared by every cs_emitter module.

Modules obtain their logger through :func:`get_logger`; handlers are only
installed when an application calls :func:`configure_logging`.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "cs_emitter"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.WARNING,
    use_rich: bool = True,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a handler to the package logger.

    Args:
        level: Logging level for the package logger.
        use_rich: Use a RichHandler instead of a plain stream handler.
        console: Console the RichHandler writes to (stderr by default).

    Returns:
        The configured package logger.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    if use_rich:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
    return logger
