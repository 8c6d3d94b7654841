"""
Configuration data models for the KV path filter.

This module defines the settings that map navigation decisions onto the
host application's routes and control how directory listings are filtered.
"""

from typing import Dict, List, Iterable, Any
from pydantic import BaseModel, Field, field_validator

from .entry import Entry, entries_from_paths


class MountConfig(BaseModel):
    """
    Configuration for the secrets mount being browsed.

    Attributes:
        name: Mount name used to build fully-qualified entry paths
        route_prefix: Route namespace the list routes live under
    """

    name: str = Field("secret", min_length=1, description="Mount name")
    route_prefix: str = Field("vault.cluster.secrets.backend.kv", min_length=1,
                              description="Route namespace of the list routes")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding separators from the mount name."""
        name = v.strip().strip('/')
        if not name:
            raise ValueError("Mount name cannot be empty")
        return name

    @field_validator('route_prefix')
    @classmethod
    def validate_route_prefix(cls, v: str) -> str:
        """Normalize the route prefix, dropping a trailing dot."""
        prefix = v.strip().rstrip('.')
        if not prefix or any(ch.isspace() for ch in prefix):
            raise ValueError(f"Invalid route prefix: '{v}'")
        return prefix

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class RoutesConfig(BaseModel):
    """
    Configuration for the routes a navigation decision is sent to.

    Attributes:
        list_route: Route showing the namespace root
        list_directory_route: Route showing a single directory
        query_param: Query parameter carrying the residual filter
    """

    list_route: str = Field("list", description="Route showing the namespace root")
    list_directory_route: str = Field("list-directory", description="Route showing a directory")
    query_param: str = Field("pageFilter", description="Query parameter carrying the filter")

    @field_validator('list_route', 'list_directory_route', 'query_param')
    @classmethod
    def validate_names(cls, v: str) -> str:
        """Route and parameter names must be single non-empty tokens."""
        v = v.strip()
        if not v:
            raise ValueError("Route names cannot be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Route names cannot contain whitespace: '{v}'")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class ListingConfig(BaseModel):
    """
    Configuration for filtering a directory listing.

    Attributes:
        case_sensitive: Whether the residual filter matches case-sensitively
    """

    case_sensitive: bool = Field(True, description="Match the residual filter case-sensitively")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class FilterConfig(BaseModel):
    """
    Main configuration class for the KV path filter.

    Attributes:
        mount: Mount being browsed
        routes: Route names decisions are translated to
        listing: Directory listing behaviour
    """

    mount: MountConfig = Field(default_factory=MountConfig, description="Mount configuration")
    routes: RoutesConfig = Field(default_factory=RoutesConfig, description="Route configuration")
    listing: ListingConfig = Field(default_factory=ListingConfig, description="Listing configuration")

    def route_name(self, route: str) -> str:
        """Get the fully-qualified name of a route under the mount's prefix."""
        return f"{self.mount.route_prefix}.{route}"

    def build_entries(self, paths: Iterable[str]) -> List[Entry]:
        """Build entries for keys listed under the configured mount."""
        return entries_from_paths(paths, mount=self.mount.name)

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for suspicious but valid settings.

        Returns:
            List of warning messages (empty if none)
        """
        warnings = []

        if self.routes.list_route == self.routes.list_directory_route:
            warnings.append(
                f"Root and directory listings share the route '{self.routes.list_route}'"
            )

        if self.routes.query_param in (self.routes.list_route, self.routes.list_directory_route):
            warnings.append(
                f"Query parameter '{self.routes.query_param}' has the same name as a route"
            )

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'mount': self.mount.to_dict(),
            'routes': self.routes.to_dict(),
            'listing': self.listing.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterConfig':
        """Create configuration from dictionary representation."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Mount: {self.mount.name}"]
        parts.append(f"Routes: {self.route_name(self.routes.list_route)}, "
                     f"{self.route_name(self.routes.list_directory_route)}")
        parts.append(f"Query param: {self.routes.query_param}")
        parts.append(f"Case sensitive: {self.listing.case_sensitive}")

        return " | ".join(parts)
