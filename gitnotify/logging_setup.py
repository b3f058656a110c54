"""Root logging configuration for command-line entry points.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by the CLI.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger at *level*.

    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
    logging.getLogger("httpx").setLevel(max(numeric, logging.WARNING))
