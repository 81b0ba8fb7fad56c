"""Module: prepboard.config

Date: 2026-10-19

Configuration package for prepboard.

Settings are organized by concern:
- app: application info, debug flags, logging
- layout: breakpoints, grid tables, drag and resize tuning, persistence keys
- catalog: the static widget catalog shipped with an installation

Everything is re-exported here:
    from prepboard.config import TABLET_MAX_WIDTH, DEFAULT_CATALOG
"""

from prepboard.config.app import *  # noqa: F401, F403
from prepboard.config.catalog import *  # noqa: F401, F403
from prepboard.config.layout import *  # noqa: F401, F403
