"""Fallback route params — parameters that cannot be known from the path.

When a fallback shell is generated for a not-yet-concrete route, the
pathname carries placeholders (``/blog/[slug]``).  Any parameter the
resolver cannot derive is recorded as a :class:`FallbackRouteParam` and
later swapped for an opaque search key in the postponed output.
"""

from __future__ import annotations

import secrets
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wren.config import DEFAULT_CONFIG, ResolverConfig
from wren.routing.route import parse_app_route


class ParamType(str, Enum):
    """Kind of a recorded fallback param."""

    DYNAMIC = "dynamic"
    CATCHALL = "catchall"
    OPTIONAL_CATCHALL = "optional-catchall"

    @property
    def short(self) -> str:
        return _SHORT_TYPES[self]


_SHORT_TYPES = {
    ParamType.DYNAMIC: "d",
    ParamType.CATCHALL: "c",
    ParamType.OPTIONAL_CATCHALL: "oc",
}


@dataclass(frozen=True, slots=True)
class FallbackRouteParam:
    """A param whose value must be supplied later (e.g. at shell build time)."""

    param_name: str
    param_type: ParamType


# name -> (search_value, short param type)
OpaqueFallbackRouteParams = dict[str, tuple[str, str]]


def create_opaque_fallback_route_params(
    fallback_route_params: Sequence[FallbackRouteParam],
) -> OpaqueFallbackRouteParams | None:
    """Map each fallback param to a unique opaque search key.

    The key ``%%drp:<name>:<id>%%`` stands in for the param in static
    output; finding one in a final response means a param leaked.  One id
    is generated per call, which keeps every key in the result unique.
    A name recorded more than once keeps its first type.

    Returns ``None`` when there are no fallback params.
    """
    if not fallback_route_params:
        return None

    unique_id = secrets.token_hex(8)
    keys: OpaqueFallbackRouteParams = {}
    for param in fallback_route_params:
        keys.setdefault(
            param.param_name,
            (f"%%drp:{param.param_name}:{unique_id}%%", param.param_type.short),
        )
    return keys


def get_fallback_route_params(
    page: str,
    tree: Any,
    config: ResolverConfig | None = None,
) -> OpaqueFallbackRouteParams | None:
    """Compute the opaque fallback params for a page pattern like ``/blog/[slug]``.

    The page's own placeholders are recorded first, with their declared
    type; the loader tree is then walked for params the page does not
    name (parallel slots, layouts).  Walking the whole tree is relatively
    expensive, so callers should compute this once per page.
    """
    from wren.routing.resolver import resolve_route_params

    config = config or DEFAULT_CONFIG
    route = parse_app_route(page, normalized=config.normalized_routes)
    fallbacks = [
        FallbackRouteParam(segment.param_name, ParamType(segment.param_type.value))
        for segment in route.dynamic_segments
        if segment.param_name and segment.param_type
    ]
    resolve_route_params(tree, {}, route, fallbacks, config=config)
    return create_opaque_fallback_route_params(fallbacks)
