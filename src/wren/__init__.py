"""Wren — route param resolution for nested layout trees.

Given a matched pathname and the loader tree of a page (layouts, route
groups, interceptions and parallel slots), computes the value of every
dynamic segment the tree declares, or reports it as a fallback param
when the pathname is only a pattern.

Basic usage::

    from wren import create_loader_tree, parse_app_route, resolve_route_params

    tree = create_loader_tree("", {"sidebar": create_loader_tree("[category]")})
    params, fallbacks = {}, []
    resolve_route_params(tree, params, parse_app_route("/tech"), fallbacks)
    assert params == {"category": "tech"}
"""

__version__ = "0.1.0"
__all__ = [
    "AppRoute",
    "FallbackRouteParam",
    "InvalidRouteError",
    "InvalidTreeError",
    "LoaderTree",
    "ParamType",
    "RequiredCatchallExhausted",
    "ResolverConfig",
    "SegmentKind",
    "SegmentType",
    "WrenError",
    "classify",
    "create_loader_tree",
    "get_fallback_route_params",
    "parse_app_route",
    "parse_loader_tree",
    "resolve_route_params",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "ResolverConfig":
        from wren.config import ResolverConfig

        return ResolverConfig

    if name == "resolve_route_params":
        from wren.routing.resolver import resolve_route_params

        return resolve_route_params

    if name in ("AppRoute", "parse_app_route"):
        from wren.routing import route as _route

        return getattr(_route, name)

    if name in ("LoaderTree", "create_loader_tree", "parse_loader_tree"):
        from wren.routing import tree as _tree

        return getattr(_tree, name)

    if name in ("SegmentKind", "SegmentType", "classify"):
        from wren.routing import segments as _segments

        return getattr(_segments, name)

    if name in ("FallbackRouteParam", "ParamType", "get_fallback_route_params"):
        from wren.routing import fallback as _fallback

        return getattr(_fallback, name)

    if name in (
        "InvalidRouteError",
        "InvalidTreeError",
        "RequiredCatchallExhausted",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
