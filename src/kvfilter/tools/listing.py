"""
Directory listings for the KV path filter.

Builds the view a navigation decision points at: the immediate children of a
directory, narrowed by the residual filter.
"""

import logging
from typing import Dict, Iterable, List, Optional, Any
from pydantic import BaseModel, Field

from ..models.entry import EntryLike, SEPARATOR, entry_path
from ..models.config import FilterConfig
from ..models.navigation import NavigationDecision


logger = logging.getLogger(__name__)


class ListingItem(BaseModel):
    """
    A single row of a directory listing.

    Attributes:
        name: Child name relative to the listed directory
        path: Child key relative to the namespace root
        is_directory: Whether the child is a sub-directory
    """

    name: str = Field(..., min_length=1, description="Child name relative to the directory")
    path: str = Field(..., min_length=1, description="Child key relative to the namespace root")
    is_directory: bool = Field(False, description="Whether the child is a sub-directory")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the item to a dictionary representation."""
        return self.model_dump()


def list_directory(entries: Iterable[EntryLike], directory: str,
                   residual_filter: Optional[str] = None,
                   case_sensitive: bool = True) -> List[ListingItem]:
    """
    List the immediate children of a directory.

    Deeper keys collapse into a single sub-directory row. Rows keep the order
    in which their first entry was seen.

    Args:
        entries: Entries (or plain keys) of the current namespace
        directory: Directory to list ('' for root)
        residual_filter: Substring a child's name must contain, None for all
        case_sensitive: Whether the filter match is case-sensitive

    Returns:
        List of ListingItem objects
    """
    needle = residual_filter or ""
    if not case_sensitive:
        needle = needle.lower()

    items: List[ListingItem] = []
    seen = set()

    for entry in entries:
        path = entry_path(entry)
        if not path.startswith(directory) or path == directory:
            continue

        remainder = path[len(directory):]
        separator_index = remainder.find(SEPARATOR)
        if separator_index >= 0:
            name = remainder[:separator_index + 1]
        else:
            name = remainder

        if name in seen:
            continue

        haystack = name if case_sensitive else name.lower()
        if needle and needle not in haystack:
            continue

        seen.add(name)
        items.append(ListingItem(
            name=name,
            path=directory + name,
            is_directory=name.endswith(SEPARATOR)
        ))

    logger.debug(f"Listed {len(items)} items in '{directory}' with filter {residual_filter!r}")
    return items


def list_for_decision(entries: Iterable[EntryLike], decision: NavigationDecision,
                      config: Optional[FilterConfig] = None) -> List[ListingItem]:
    """
    List the directory a navigation decision points at.

    Args:
        entries: Entries of the current namespace
        decision: Decision returned by the path filter engine
        config: Listing configuration, defaults to FilterConfig()

    Returns:
        List of ListingItem objects
    """
    config = config or FilterConfig()
    return list_directory(
        entries,
        decision.target_directory,
        decision.residual_filter,
        case_sensitive=config.listing.case_sensitive
    )
