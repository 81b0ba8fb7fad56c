"""Shared utilities: event system and logging."""
