"""
Path filter engine for the KV path filter.

This module turns the contents of a listing's filter box into a navigation
decision: which directory to display and which residual substring to filter
it by. Every call is a pure function of its arguments; the caller owns the
filter text and the displayed directory.
"""

import logging
from typing import Iterable, Set

from ..models.entry import EntryLike, SEPARATOR, entry_path
from ..models.navigation import (
    NavigationDecision,
    EditEvent,
    BackspaceEvent,
    EscapeEvent,
    FilterEvent,
)


class PathFilterEngine:
    """
    Resolves filter input events against a snapshot of namespace entries.

    Directories are never stored: they are derived from the entries on every
    call, so a changed listing is picked up immediately.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def candidate_directories(self, entries: Iterable[EntryLike]) -> Set[str]:
        """
        Collect every directory prefix implied by the entries.

        Args:
            entries: Entries (or plain keys) of the current namespace

        Returns:
            Set of separator-terminated directory prefixes
        """
        directories = set()
        for entry in entries:
            path = entry_path(entry)
            if not path:
                continue

            prefix = ""
            for segment in path.split(SEPARATOR)[:-1]:
                prefix += segment + SEPARATOR
                directories.add(prefix)

        return directories

    def resolve(self, entries: Iterable[EntryLike], current_directory: str,
                typed_value: str) -> NavigationDecision:
        """
        Resolve an ordinary edit of the filter box.

        Args:
            entries: Entries of the current namespace
            current_directory: Directory currently displayed ('' for root)
            typed_value: Full contents of the filter box

        Returns:
            NavigationDecision for the new value
        """
        if not typed_value:
            decision = NavigationDecision(
                target_directory="",
                residual_filter=None,
                is_directory_change=current_directory != ""
            )
            self.logger.debug(f"Empty filter resolved to root: {decision}")
            return decision

        directory = self._longest_directory(self.candidate_directories(entries), typed_value)
        residual = typed_value[len(directory):]

        decision = NavigationDecision(
            target_directory=directory,
            residual_filter=residual or None,
            is_directory_change=directory != current_directory
        )
        self.logger.debug(f"Resolved '{typed_value}' from '{current_directory}': {decision}")
        return decision

    def on_backspace(self, entries: Iterable[EntryLike], current_directory: str,
                     previous_value: str) -> NavigationDecision:
        """
        Resolve a backspace key press before the character is removed.

        Erasing the trailing separator of the displayed directory ascends to
        its parent, with the erased directory's name left as the filter. Any
        other deletion is resolved as an ordinary edit.

        Args:
            entries: Entries of the current namespace
            current_directory: Directory currently displayed ('' for root)
            previous_value: Contents of the filter box before the deletion

        Returns:
            NavigationDecision for the value after the deletion
        """
        crosses_boundary = (
            previous_value.endswith(SEPARATOR)
            and current_directory != ""
            and previous_value == current_directory
        )
        if not crosses_boundary:
            return self.resolve(entries, current_directory, previous_value[:-1])

        ancestors = {
            directory for directory in self.candidate_directories(entries)
            if len(directory) < len(current_directory)
        }
        parent = self._longest_directory(ancestors, current_directory)

        segment = current_directory[len(parent):]
        if segment.endswith(SEPARATOR):
            segment = segment[:-1]

        decision = NavigationDecision(
            target_directory=parent,
            residual_filter=segment or None,
            is_directory_change=True
        )
        self.logger.debug(f"Backspace ascended from '{current_directory}': {decision}")
        return decision

    def on_escape(self, current_directory: str) -> NavigationDecision:
        """
        Resolve an escape key press: clear the filter, keep the directory.

        Args:
            current_directory: Directory currently displayed ('' for root)

        Returns:
            NavigationDecision without a filter or a route transition
        """
        return NavigationDecision(
            target_directory=current_directory,
            residual_filter=None,
            is_directory_change=False
        )

    def dispatch(self, entries: Iterable[EntryLike], current_directory: str,
                 event: FilterEvent) -> NavigationDecision:
        """
        Route an input event to the matching operation.

        Args:
            entries: Entries of the current namespace
            current_directory: Directory currently displayed ('' for root)
            event: The filter box event

        Returns:
            NavigationDecision for the event

        Raises:
            TypeError: If the event is not a known filter event
        """
        if isinstance(event, EditEvent):
            return self.resolve(entries, current_directory, event.value)
        if isinstance(event, BackspaceEvent):
            return self.on_backspace(entries, current_directory, event.previous_value)
        if isinstance(event, EscapeEvent):
            return self.on_escape(current_directory)

        raise TypeError(f"Unsupported filter event: {type(event).__name__}")

    def _longest_directory(self, directories: Set[str], value: str) -> str:
        """Find the longest directory that prefixes the value, '' if none does."""
        return max(
            (directory for directory in directories if value.startswith(directory)),
            key=len,
            default=""
        )


_default_engine = PathFilterEngine()


def resolve(entries: Iterable[EntryLike], current_directory: str, typed_value: str) -> NavigationDecision:
    """Convenience wrapper for PathFilterEngine.resolve."""
    return _default_engine.resolve(entries, current_directory, typed_value)


def on_backspace(entries: Iterable[EntryLike], current_directory: str,
                 previous_value: str) -> NavigationDecision:
    """Convenience wrapper for PathFilterEngine.on_backspace."""
    return _default_engine.on_backspace(entries, current_directory, previous_value)


def on_escape(current_directory: str) -> NavigationDecision:
    """Convenience wrapper for PathFilterEngine.on_escape."""
    return _default_engine.on_escape(current_directory)


def dispatch(entries: Iterable[EntryLike], current_directory: str,
             event: FilterEvent) -> NavigationDecision:
    """Convenience wrapper for PathFilterEngine.dispatch."""
    return _default_engine.dispatch(entries, current_directory, event)
