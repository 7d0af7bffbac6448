"""browser package

Provides the acceptance test actions on top of Playwright's sync API.
This package includes the following modules:
- actions: High-level helper actions (screenshots, forms, confirm dialogs, table links)
- selects: Multi-part date/time select widgets
- form_completer: Field-by-field completion of Rails forms
- finder: Element lookup with descriptive failure messages
- locators: CSS/XPath selector templating
"""

from .actions import (ById, ByLabel, click_link_inside_row, complete_form,
                      find_and_select_option, javascript_confirm,
                      select_date, select_datetime, select_time,
                      take_screenshot)
from .finder import find
from .form_completer import FormCompleter
from .selects import SelectSource, resolve_prefix, select_source

__all__: list[str] = [
    "take_screenshot",
    "complete_form",
    "select_datetime",
    "select_date",
    "select_time",
    "find_and_select_option",
    "javascript_confirm",
    "click_link_inside_row",
    "find",
    "FormCompleter",
    "ById",
    "ByLabel",
    "SelectSource",
    "select_source",
    "resolve_prefix",
]
