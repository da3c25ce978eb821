"""Tests for blobworld/debug.py — environment flag and logging setup."""

from __future__ import annotations

import importlib
import logging
import os
from unittest.mock import patch


class TestDebugFlag:
    def test_debug_false_by_default(self):
        """DEBUG is False when BLOBWORLD_DEBUG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            import blobworld.debug
            importlib.reload(blobworld.debug)
            assert blobworld.debug.DEBUG is False

    def test_debug_true_when_set(self):
        with patch.dict(os.environ, {"BLOBWORLD_DEBUG": "1"}):
            import blobworld.debug
            importlib.reload(blobworld.debug)
            assert blobworld.debug.DEBUG is True

    def test_debug_false_when_zero(self):
        with patch.dict(os.environ, {"BLOBWORLD_DEBUG": "0"}):
            import blobworld.debug
            importlib.reload(blobworld.debug)
            assert blobworld.debug.DEBUG is False


class TestConfigureLogging:
    def test_level_follows_flag(self):
        import blobworld.debug
        with patch.object(blobworld.debug, "DEBUG", True), \
                patch("blobworld.debug.logging.basicConfig") as basic:
            blobworld.debug.configure_logging()
        assert basic.call_args.kwargs["level"] == logging.DEBUG

        with patch.object(blobworld.debug, "DEBUG", False), \
                patch("blobworld.debug.logging.basicConfig") as basic:
            blobworld.debug.configure_logging()
        assert basic.call_args.kwargs["level"] == logging.WARNING
