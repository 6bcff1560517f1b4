"""Wren exception hierarchy.

Shared across the classifier, route parser, tree adapter, and resolver so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class InvalidRouteError(WrenError):
    """Raised when a pathname cannot be parsed into an ``AppRoute``."""


class InvalidTreeError(WrenError):
    """Raised when a raw loader tree does not have the expected shape."""


class RequiredCatchallExhausted(WrenError):  # noqa: N818 — names the condition, not the failure
    """A required catch-all has no path segments left to consume.

    Signals that the tree and the matched route are structurally
    inconsistent: the matcher applied this tree to a path that is too
    short for a mandatory ``[...name]`` segment.  Not a per-request
    condition; treat it as a routing configuration bug.
    """

    def __init__(self, param_name: str, pathname: str, depth: int) -> None:
        self.param_name = param_name
        self.pathname = pathname
        self.depth = depth
        super().__init__(
            f"Unexpected empty path segments match for route {pathname!r} "
            f"with catch-all param {param_name!r} at depth {depth}"
        )
