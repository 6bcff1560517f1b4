"""Route param resolution over a loader tree.

Walks every node of a page's loader tree alongside the matched route's
path segments and binds each ``[name]``, ``[...name]`` and
``[[...name]]`` segment it meets.  Route groups occupy no URL position;
every other non-root segment, interceptions included, consumes one.

Sibling slots start from the same depth::

    tree:   "" ─ children: "blog" ─ sidebar: "[...rest]"
                                  └ children: "[slug]"
    route:  /blog/2023/posts

    [...rest] and [slug] both resolve at depth 1:
    rest = ["2023", "posts"], slug = "2023"

Params already bound by an enclosing layout are never re-derived.
Params that cannot be derived from the path (too short, or a
placeholder at that position) are appended to the fallback list
instead.  A required catch-all with nothing left to consume raises
``RequiredCatchallExhausted``.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, MutableSequence
from typing import TYPE_CHECKING, Any, TypeAlias

from wren.config import DEFAULT_CONFIG, ResolverConfig
from wren.errors import RequiredCatchallExhausted
from wren.routing.fallback import FallbackRouteParam, ParamType
from wren.routing.segments import SegmentKind, SegmentType, classify
from wren.routing.tree import parse_loader_tree

if TYPE_CHECKING:
    from wren.routing.route import AppRoute
    from wren.routing.tree import LoaderTree

logger = logging.getLogger("wren.routing")

ParamValue: TypeAlias = str | list[str]
Params: TypeAlias = MutableMapping[str, ParamValue]
FallbackRouteParams: TypeAlias = MutableSequence[FallbackRouteParam]


def resolve_route_params(
    tree: Any,
    params: Params,
    route: AppRoute,
    fallbacks: FallbackRouteParams,
    *,
    config: ResolverConfig | None = None,
) -> None:
    """Bind every param declared in *tree* from *route*'s path segments.

    Mutates *params* (insert only) and *fallbacks* (append only).

    Args:
        tree: A ``LoaderTree`` or any raw shape ``parse_loader_tree`` accepts.
        params: Params bound so far; existing entries are left untouched.
        route: The matched route.
        fallbacks: Params that could not be derived from the path.
        config: Resolver options; defaults to ``ResolverConfig()``.

    Raises:
        RequiredCatchallExhausted: A ``[...name]`` segment sits at or past
            the end of the path.
    """
    _resolve_node(
        parse_loader_tree(tree),
        0,
        params,
        route,
        fallbacks,
        config or DEFAULT_CONFIG,
    )


def _resolve_node(
    node: LoaderTree,
    depth: int,
    params: Params,
    route: AppRoute,
    fallbacks: FallbackRouteParams,
    config: ResolverConfig,
) -> None:
    stack: list[tuple[LoaderTree, int]] = [(node, depth)]
    while stack:
        current, current_depth = stack.pop()
        kind = classify(current.segment)

        if kind.is_param and not _is_known(kind.name, params, fallbacks, config):
            _resolve_param(kind, current_depth, params, route, fallbacks)

        # A bound param still occupies its position for the nodes beneath it
        child_depth = current_depth + kind.depth_contribution
        # Reversed so the first slot is popped first
        for child in reversed(current.slots.values()):
            stack.append((child, child_depth))


def _is_known(
    name: str,
    params: Params,
    fallbacks: FallbackRouteParams,
    config: ResolverConfig,
) -> bool:
    if name in params:
        return True
    if config.skip_known_fallbacks:
        return any(param.param_name == name for param in fallbacks)
    return False


def _resolve_param(
    kind: SegmentKind,
    depth: int,
    params: Params,
    route: AppRoute,
    fallbacks: FallbackRouteParams,
) -> None:
    segments = route.path_segments
    name = kind.name

    if kind.type is SegmentType.DYNAMIC:
        if depth >= len(segments) or route.is_placeholder(depth):
            _add_fallback(fallbacks, name, ParamType.DYNAMIC, depth)
            return
        params[name] = segments[depth]
        logger.debug("Bound param %r = %r at depth %d", name, segments[depth], depth)
        return

    # Catch-alls consume everything from depth to the end
    if depth >= len(segments):
        if kind.type is SegmentType.OPTIONAL_CATCHALL:
            return
        logger.debug("Catch-all %r exhausted at depth %d of %r", name, depth, route.pathname)
        raise RequiredCatchallExhausted(name, route.pathname, depth)

    if any(route.is_placeholder(i) for i in range(depth, len(segments))):
        _add_fallback(fallbacks, name, ParamType.CATCHALL, depth)
        return

    value = list(segments[depth:])
    params[name] = value
    logger.debug("Bound catch-all %r = %r at depth %d", name, value, depth)


def _add_fallback(
    fallbacks: FallbackRouteParams,
    name: str,
    param_type: ParamType,
    depth: int,
) -> None:
    fallbacks.append(FallbackRouteParam(name, param_type))
    logger.debug("Param %r recorded as %s fallback at depth %d", name, param_type.value, depth)
