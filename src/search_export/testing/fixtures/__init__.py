"""Testing fixtures – pytest fixtures for the fake host services.

Enable in ``conftest.py``::

    pytest_plugins = ["search_export.testing.fixtures"]
"""
from search_export.testing.fixtures.clock import fake_clock
from search_export.testing.fixtures.core import SEARCH_BODY, fake_core, search_panel

__all__ = ["SEARCH_BODY", "fake_clock", "fake_core", "search_panel"]
