"""Utility modules for crumb."""

from .git import get_git_author

__all__ = ["get_git_author"]
