"""Qt-facing layer of prepboard."""
