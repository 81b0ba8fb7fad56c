"""Module: controllers/__init__.py

Date: 2026-10-19

UI-agnostic controllers for the widget layout engine.

- EditModeController: edit-mode flag, gated mutators, edit checkpoint
- PageLayoutController: facade used by host UIs
"""

from prepboard.controllers.edit_mode_controller import EditModeController
from prepboard.controllers.page_layout_controller import PageLayoutController

__all__ = [
    "EditModeController",
    "PageLayoutController",
]
