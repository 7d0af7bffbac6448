"""browser.actions

High-level helper actions for acceptance tests driven through a Playwright
``Page``: screenshots, form completion, date/time select widgets, a
simulated ``confirm()`` dialog and clicking links inside table rows.

The select widget helpers live in ``browser.selects`` and are re-exported
here so tests only need this one import.
"""

from __future__ import annotations

import datetime
import logging
import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, Optional

from playwright.sync_api import Error as PlaywrightError

from .. import constants
from .. import settings as settings_mod
from ..context import ExampleContext
from ..settings import ScreenshotSettings
from ..utils import add_debug_log, log_operation_error
from .finder import find
from .form_completer import FormCompleter
from .locators import row_link_xpath
from .selects import (ById, ByLabel, find_and_select_option, select_date,
                      select_datetime, select_time)

if TYPE_CHECKING:  # pragma: no cover
    from playwright.sync_api import Page

logger = logging.getLogger(__name__)

__all__ = [
    "take_screenshot",
    "complete_form",
    "select_datetime",
    "select_date",
    "select_time",
    "find_and_select_option",
    "javascript_confirm",
    "click_link_inside_row",
    "ById",
    "ByLabel",
]

# ---------------------------------------------------------------------------
# Screenshots
# ---------------------------------------------------------------------------


def _timestamp_name(now: Optional[datetime.datetime] = None) -> str:
    now = now or datetime.datetime.now()
    return now.strftime(constants.SCREENSHOT_TIMESTAMP_FORMAT) + f"{now.microsecond // 1000:03d}"


def take_screenshot(
    page: "Page",
    example: ExampleContext,
    name: Optional[str] = None,
    *,
    settings: Optional[ScreenshotSettings] = None,
) -> Optional[str]:
    """Take a screenshot of the current page.

    Only examples marked ``js`` run in a real browser, and the configured
    screenshot directory must exist; otherwise a warning is logged and
    nothing is captured.

    Args:
        page: Page to capture
        example: Metadata of the running example
        name: File name without extension (current time with milliseconds by default)
        settings: Screenshot settings (the global ``settings`` by default)

    Returns:
        Path of the saved PNG, or None when the capture was skipped
    """

    settings = settings or settings_mod.settings

    if not example.js:
        add_debug_log(
            "Screenshots can only be captured when an example is marked with js",
            level="WARNING",
        )
        return None

    if not settings.directory_exists():
        add_debug_log(
            f"Screenshot directory doesn't exist! ({settings.directory!r})",
            level="WARNING",
        )
        return None

    name = name or _timestamp_name()
    path = os.path.join(settings.directory, f"{name}{constants.SCREENSHOT_EXTENSION}")
    page.screenshot(path=path)
    logger.info("Saved screenshot to %s", path)

    if settings.callback:
        settings.callback(path)
    return path


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------


@contextmanager
def complete_form(page: "Page", base: Any) -> Iterator[FormCompleter]:
    """Complete and submit a form.

    The block receives a FormCompleter; the form is submitted when the block
    finishes unless it already called ``submit`` itself:

        with complete_form(page, "post") as f:
            f.text_field("author", "Joshua Priddle")
            f.checkbox("admin", True)
            f.datetime("publish_at", datetime.datetime.now())

    An exception inside the block propagates and the form is not submitted.
    """

    form = FormCompleter(page, base)
    yield form
    if not form.submitted:
        form.submit()


# ---------------------------------------------------------------------------
# Dialogs and tables
# ---------------------------------------------------------------------------

# Stacked so nested overrides unwind in order
_OVERRIDE_CONFIRM_JS = """(result) => {
    window.__confirmStack = window.__confirmStack || [];
    window.__confirmStack.push(window.confirm);
    window.confirm = function() { return result; };
}"""

_RESTORE_CONFIRM_JS = """() => {
    if (window.__confirmStack && window.__confirmStack.length) {
        window.confirm = window.__confirmStack.pop();
    }
}"""


@contextmanager
def javascript_confirm(page: "Page", result: Any = True) -> Iterator[None]:
    """Answer every ``window.confirm()`` with ``result`` inside the block.

        with javascript_confirm(page):
            page.click("text=Destroy")

        with javascript_confirm(page, False):
            page.click("text=Destroy")

    The original ``confirm`` is restored when the block exits, also when it
    raises. A page the block navigated to keeps its own untouched ``confirm``,
    and a restore that fails because the old page is gone is only logged.
    """

    result = bool(result)
    page.evaluate(_OVERRIDE_CONFIRM_JS, result)
    add_debug_log(f"javascript_confirm: window.confirm returns {result}")
    try:
        yield
    finally:
        try:
            page.evaluate(_RESTORE_CONFIRM_JS)
            add_debug_log("javascript_confirm: window.confirm restored")
        except PlaywrightError as e:
            # The block navigated away and took the override with it
            log_operation_error(
                "javascript_confirm", f"window.confirm not restored: {e}"
            )


def click_link_inside_row(page: "Page", lookup: str, row_content: str) -> None:
    """Find a link inside a table row and click it.

    Args:
        page: Page to search
        lookup: Text of the link
        row_content: Text identifying the row
    """

    message = (
        f"cannot click link, no link with text '{lookup}' "
        f"in a row containing '{row_content}'"
    )
    find(page, row_link_xpath(row_content), message, has_text=lookup).click()
