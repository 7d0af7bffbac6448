"""acceptance_actions

Helper actions for browser-driven acceptance tests built on Playwright.
"""

from .browser import (ById, ByLabel, FormCompleter, click_link_inside_row,
                      complete_form, find_and_select_option,
                      javascript_confirm, select_date, select_datetime,
                      select_time, take_screenshot)
from .context import ExampleContext
from .exceptions import (AcceptanceActionsError, ElementNotFoundError,
                         SelectSourceMissingError)
from .settings import ScreenshotSettings, configure

__version__ = "0.1.0"

__all__: list[str] = [
    "take_screenshot",
    "complete_form",
    "select_datetime",
    "select_date",
    "select_time",
    "find_and_select_option",
    "javascript_confirm",
    "click_link_inside_row",
    "FormCompleter",
    "ById",
    "ByLabel",
    "ExampleContext",
    "ScreenshotSettings",
    "configure",
    "AcceptanceActionsError",
    "ElementNotFoundError",
    "SelectSourceMissingError",
]
