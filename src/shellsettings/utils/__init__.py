"""Shared utilities for the shellsettings package."""
