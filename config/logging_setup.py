"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this installs one stream
handler on the root logger at startup.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_sales_backend", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        handler._sales_backend = True  # type: ignore[attr-defined]
        root.addHandler(handler)


__all__ = ["configure_logging"]
