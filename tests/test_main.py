"""Tests for the application entry point."""

import importlib
import logging

import yzcore.main


def test_import_leaves_root_logging_alone():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    importlib.reload(yzcore.main)
    assert root.handlers == handlers
    assert root.level == level
