"""
constants module
"""

import os

# Log level setting ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_LEVEL = "INFO"

# Default timeout for Playwright lookups (milliseconds)
DEFAULT_TIMEOUT_MS = int(os.environ.get("ACTIONS_TIMEOUT_MS", "5000"))

# Screenshot output directory environment variable
SCREENSHOT_DIR_ENV = "SCREENSHOT_DIR"

# Default screenshot name: timestamp with milliseconds
SCREENSHOT_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
SCREENSHOT_EXTENSION = ".png"

# Marker that flags an example as running in a JavaScript-capable browser
JS_MARKER = "js"

# pytest ini options read by the plugin
SETUP_LOGGING_INI = "actions_setup_logging"
LOG_LEVEL_INI = "actions_log_level"
