"""settings

Screenshot output configuration shared by every example in a test run.

``settings`` is a module-global instance initialised from the
``SCREENSHOT_DIR`` environment variable when the module is loaded; test
suites adjust it with :func:`configure` (typically from ``conftest.py``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from . import constants
from .utils import add_debug_log

ScreenshotCallback = Callable[[str], object]


@dataclass
class ScreenshotSettings:
    """Where screenshots go and what runs after each one is saved"""

    directory: Optional[str] = None
    callback: Optional[ScreenshotCallback] = None

    def directory_exists(self) -> bool:
        return bool(self.directory) and os.path.isdir(self.directory)


settings = ScreenshotSettings(directory=os.environ.get(constants.SCREENSHOT_DIR_ENV) or None)

_UNSET = object()


def configure(directory=_UNSET, callback=_UNSET) -> ScreenshotSettings:
    """Update the global screenshot settings.

    Only the arguments that are passed are changed; pass ``None`` to clear one.
    """

    if directory is not _UNSET:
        settings.directory = os.fspath(directory) if directory is not None else None
    if callback is not _UNSET:
        settings.callback = callback
    add_debug_log(
        f"Screenshot settings: directory={settings.directory}, "
        f"callback={'set' if settings.callback else 'unset'}"
    )
    return settings
