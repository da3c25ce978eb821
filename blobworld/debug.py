"""blobworld/debug.py — Debug flag from environment variable."""

import logging
import os

DEBUG = os.environ.get("BLOBWORLD_DEBUG", "") == "1"


def configure_logging() -> None:
    """Install a stream handler on the root logger, verbose when DEBUG is on."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
