"""prepboard - widget layout and reorder engine for the project dashboard.

Pages host ordered collections of configurable widgets that can be enabled,
resized and reordered by pointer or keyboard while edit mode is on.
"""

from prepboard.config.app import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "__version__"]
