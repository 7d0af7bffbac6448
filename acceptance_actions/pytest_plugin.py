"""pytest plugin

Load it from a top-level ``conftest.py`` with
``pytest_plugins = ["acceptance_actions.pytest_plugin"]``. Registers the ``js``
marker, optionally configures logging (``actions_setup_logging = true``
in the ini file) and provides the fixtures the browser actions need:

- ``example_context``: the running test's metadata (``ExampleContext``)
- ``screenshot_settings``: the global screenshot settings, restored after the test
"""

from __future__ import annotations

import pytest

from . import constants
from .context import ExampleContext
from .settings import settings
from .utils import add_debug_log, setup_logging


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        constants.SETUP_LOGGING_INI,
        type="bool",
        default=False,
        help="configure stdout logging for acceptance_actions at startup",
    )
    parser.addini(
        constants.LOG_LEVEL_INI,
        default="",
        help="log level used with actions_setup_logging (LOG_LEVEL env otherwise)",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{constants.JS_MARKER}: example runs in a JavaScript-capable browser "
        "(enables screenshots)",
    )
    if config.getini(constants.SETUP_LOGGING_INI):
        setup_logging(config.getini(constants.LOG_LEVEL_INI) or None)


@pytest.fixture
def example_context(request: pytest.FixtureRequest) -> ExampleContext:
    context = ExampleContext.from_node(request.node)
    add_debug_log(f"example_context: {request.node.nodeid} {context.metadata}")
    return context


@pytest.fixture
def screenshot_settings():
    saved = (settings.directory, settings.callback)
    yield settings
    settings.directory, settings.callback = saved
