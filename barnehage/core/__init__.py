"""Core module for the barnehage application."""

from .types import GroupColors, GroupDefinition, GroupInfo

__all__ = ["GroupColors", "GroupDefinition", "GroupInfo"]
