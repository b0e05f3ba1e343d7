"""Colour, icon and git-status themes loaded from YAML on top of built-in defaults."""

__version__ = "1.1.5"
__all__ = ["color", "git", "icon", "icon_extensions", "icon_names", "schema"]