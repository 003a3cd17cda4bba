"""Logging setup for the CLI and tests."""

from __future__ import annotations

import logging

# httpx logs every request at INFO, which drowns out page progress on large sites.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    transport_level: int = logging.WARNING,
) -> None:
    """Initialise the root logger with a terse CLI format.

    ``transport_level`` applies to the HTTP client loggers only. Pass
    ``force=True`` to reconfigure an already initialised root logger.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, transport_level))
