"""Module: prepboard.config.app

Date: 2026-10-19

Application-level configuration: app info, debug flags, logging settings.
"""

# =====================================
# DEBUG SETTINGS
# =====================================

# Layout reset - if True, LayoutStore.load() deletes the saved layout first
DEBUG_RESET_LAYOUT = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "prepboard"
APP_VERSION = "0.4.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
