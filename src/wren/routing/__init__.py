"""Routing — loader tree param resolution.

Classifies loader tree segments, parses matched pathnames, and binds
every dynamic segment declared across a page's layouts and parallel
slots.
"""

from wren.routing.fallback import (
    FallbackRouteParam,
    ParamType,
    create_opaque_fallback_route_params,
    get_fallback_route_params,
)
from wren.routing.resolver import resolve_route_params
from wren.routing.route import AppRoute, RouteSegment, parse_app_route
from wren.routing.segments import SegmentKind, SegmentType, classify
from wren.routing.tree import PRIMARY_SLOT, LoaderTree, create_loader_tree, parse_loader_tree

__all__ = [
    "PRIMARY_SLOT",
    "AppRoute",
    "FallbackRouteParam",
    "LoaderTree",
    "ParamType",
    "RouteSegment",
    "SegmentKind",
    "SegmentType",
    "classify",
    "create_loader_tree",
    "create_opaque_fallback_route_params",
    "get_fallback_route_params",
    "parse_app_route",
    "parse_loader_tree",
    "resolve_route_params",
]
