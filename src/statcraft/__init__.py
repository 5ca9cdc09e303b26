"""Attribute algebra, items and professions for role-playing characters."""

__version__ = "0.1.0"
