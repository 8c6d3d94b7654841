"""
Entry data models for the KV path filter.

This module defines the leaf keys of a hierarchically-namespaced listing and
the small path helpers used to reason about `/`-delimited keys.
"""

from typing import Dict, List, Iterable, Optional, Any, Union
from pydantic import BaseModel, Field, model_validator


SEPARATOR = '/'


class Entry(BaseModel):
    """
    A single leaf key in the namespace.

    Attributes:
        path: Key relative to the namespace root (e.g. 'beep/boop/bop')
        full_path: Fully-qualified identifier, defaults to path
    """

    path: str = Field(..., min_length=1, description="Key relative to the namespace root")
    full_path: str = Field("", description="Fully-qualified identifier of the key")

    @model_validator(mode='after')
    def default_full_path(self):
        """Fall back to the relative path when no full path was given."""
        if not self.full_path:
            self.full_path = self.path
        return self

    @classmethod
    def for_mount(cls, mount: str, path: str) -> 'Entry':
        """Create an entry whose full path is prefixed with a mount name."""
        mount = mount.strip(SEPARATOR)
        return cls(path=path, full_path=f"{mount}{SEPARATOR}{path}" if mount else path)

    @property
    def name(self) -> str:
        """Last segment of the key, keeping a trailing separator for directory keys."""
        return self.path[len(parent_directory(self.path)):]

    def is_directory(self) -> bool:
        """Check if this key denotes a directory."""
        return is_directory(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Entry':
        """Create an Entry instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return self.full_path


def is_directory(path: str) -> bool:
    """Check if a key ends with the hierarchy separator."""
    return path.endswith(SEPARATOR)


def parent_directory(path: str) -> str:
    """
    Get the directory containing a key.

    Args:
        path: Key or directory path

    Returns:
        The separator-terminated parent, or '' for top-level keys
    """
    index = path.rstrip(SEPARATOR).rfind(SEPARATOR)
    if index < 0:
        return ""
    return path[:index + 1]


def entries_from_paths(paths: Iterable[str], mount: Optional[str] = None) -> List[Entry]:
    """
    Build entries from plain key strings.

    Args:
        paths: Keys relative to the namespace root
        mount: Optional mount name used to build each full path

    Returns:
        List of Entry objects in the given order
    """
    if mount:
        return [Entry.for_mount(mount, path) for path in paths]
    return [Entry(path=path) for path in paths]


EntryLike = Union[Entry, str]


def entry_path(entry: EntryLike) -> str:
    """Get the relative key of an Entry or of a plain key string."""
    return entry if isinstance(entry, str) else entry.path
