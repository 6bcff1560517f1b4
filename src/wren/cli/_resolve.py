"""``wren resolve`` — resolve route params for a pathname against a JSON tree.

Prints a JSON object with the bound params and the fallback params::

    $ wren resolve tree.json /blog/2023/posts
    {"params": {"rest": ["2023", "posts"]}, "fallbacks": []}
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from wren.config import ResolverConfig
from wren.errors import WrenError
from wren.routing.fallback import FallbackRouteParam, ParamType
from wren.routing.resolver import Params, resolve_route_params
from wren.routing.route import parse_app_route
from wren.routing.tree import parse_loader_tree

logger = logging.getLogger("wren.cli")


def parse_param_args(values: list[str]) -> Params:
    """Turn ``NAME=VALUE`` pairs into params; a repeated name becomes a list."""
    params: Params = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            msg = f"Expected NAME=VALUE, got {item!r}"
            raise ValueError(msg)
        if name in params:
            existing = params[name]
            params[name] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[name] = value
    return params


def parse_fallback_args(values: list[str]) -> list[FallbackRouteParam]:
    """Turn ``NAME:TYPE`` pairs into fallback params."""
    fallbacks: list[FallbackRouteParam] = []
    for item in values:
        name, sep, type_name = item.partition(":")
        if not sep or not name:
            msg = f"Expected NAME:TYPE, got {item!r}"
            raise ValueError(msg)
        fallbacks.append(FallbackRouteParam(name, ParamType(type_name)))
    return fallbacks


def run_resolve(args: argparse.Namespace) -> None:
    """Load ``args.tree``, resolve ``args.pathname`` and print the result as JSON."""
    config = ResolverConfig(
        skip_known_fallbacks=not args.keep_duplicates,
        normalized_routes=not args.allow_groups,
    )
    try:
        raw = json.loads(Path(args.tree).read_text(encoding="utf-8"))
        params = parse_param_args(args.param)
        fallbacks = parse_fallback_args(args.fallback)
        tree = parse_loader_tree(raw)
        route = parse_app_route(args.pathname, normalized=config.normalized_routes)
        resolve_route_params(tree, params, route, fallbacks, config=config)
    except (OSError, ValueError, WrenError) as exc:
        logger.debug("wren resolve failed for %r", args.pathname, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = {
        "params": dict(params),
        "fallbacks": [
            {"paramName": f.param_name, "paramType": f.param_type.value} for f in fallbacks
        ],
    }
    print(json.dumps(result))
