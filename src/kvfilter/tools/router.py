"""
Route transitions for the KV path filter.

This module translates navigation decisions into the route name, route model
and query parameters the host application's router consumes.
"""

import logging
from typing import Dict, List, Optional, Any
from pydantic import BaseModel, ConfigDict, Field

from ..models.config import FilterConfig
from ..models.navigation import NavigationDecision


logger = logging.getLogger(__name__)


class RouteTransition(BaseModel):
    """
    A router call derived from a navigation decision.

    Attributes:
        route: Fully-qualified route name
        path_to_secret: Directory passed to the route, None for the root listing
        query_params: Query parameters, with the filter set to None when absent
        replace_in_place: Whether only the query parameters change
    """

    model_config = ConfigDict(frozen=True)

    route: str = Field(..., min_length=1, description="Fully-qualified route name")
    path_to_secret: Optional[str] = Field(None, description="Directory passed to the route")
    query_params: Dict[str, Optional[str]] = Field(default_factory=dict, description="Query parameters")
    replace_in_place: bool = Field(False, description="Whether only the query parameters change")

    def args(self) -> List[str]:
        """Get the positional arguments for the router's transition call."""
        if self.path_to_secret:
            return [self.route, self.path_to_secret]
        return [self.route]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the transition to a dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        parts = [f"Route: {self.route}"]
        if self.path_to_secret:
            parts.append(f"Path: {self.path_to_secret}")
        for name, value in self.query_params.items():
            parts.append(f"{name}={value}")
        if self.replace_in_place:
            parts.append("In place")

        return " | ".join(parts)


def build_transition(decision: NavigationDecision, config: Optional[FilterConfig] = None) -> RouteTransition:
    """
    Build the router call for a navigation decision.

    Args:
        decision: Decision returned by the path filter engine
        config: Route configuration, defaults to FilterConfig()

    Returns:
        RouteTransition for the decision
    """
    config = config or FilterConfig()
    routes = config.routes

    if decision.target_directory:
        route = config.route_name(routes.list_directory_route)
        path_to_secret = decision.target_directory
    else:
        route = config.route_name(routes.list_route)
        path_to_secret = None

    transition = RouteTransition(
        route=route,
        path_to_secret=path_to_secret,
        query_params={routes.query_param: decision.residual_filter},
        replace_in_place=not decision.is_directory_change
    )
    logger.debug(f"Transition for {decision}: {transition}")
    return transition
