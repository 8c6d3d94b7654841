"""
Data models for the KV path filter.

This module contains the entries, decisions, events and configuration used
throughout the package.
"""

from .entry import Entry, entries_from_paths, is_directory, parent_directory
from .navigation import NavigationDecision, EditEvent, BackspaceEvent, EscapeEvent, FilterEvent
from .config import FilterConfig

__all__ = [
    'Entry',
    'entries_from_paths',
    'is_directory',
    'parent_directory',
    'NavigationDecision',
    'EditEvent',
    'BackspaceEvent',
    'EscapeEvent',
    'FilterEvent',
    'FilterConfig'
]
