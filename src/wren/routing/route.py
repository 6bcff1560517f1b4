"""AppRoute and RouteSegment frozen dataclasses, plus the pathname parser.

The resolver consumes an :class:`AppRoute` built from a matched request
pathname.  Real requests carry only concrete values; synthetic "pattern"
pathnames (``/blog/[slug]``) used to probe fallback shells carry bracket
placeholders, reported through :meth:`AppRoute.is_placeholder`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from wren.errors import InvalidRouteError
from wren.routing.segments import SegmentType, classify, interception_marker_of

RouteSegmentType = Literal["static", "dynamic", "route-group", "parallel-route"]


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """A parsed segment of a pathname.

    Static:    ``/blog``        (type="static")
    Dynamic:   ``/[slug]``      (type="dynamic", param_name="slug")
    Group:     ``/(marketing)`` (type="route-group")
    Parallel:  ``/@modal``      (type="parallel-route")

    Any of them may carry an interception marker (``/(.)photo``).
    """

    name: str
    type: RouteSegmentType
    param_name: str | None = None
    param_type: SegmentType | None = None
    interception_marker: str | None = None

    @property
    def contributes_to_path(self) -> bool:
        return self.type in ("static", "dynamic")


def parse_route_segment(segment: str) -> RouteSegment | None:
    """Parse one pathname token. Returns ``None`` for the empty token."""
    if segment == "":
        return None

    marker = interception_marker_of(segment)
    bare = segment[len(marker) :] if marker else segment
    kind = classify(bare)

    if kind.is_param:
        return RouteSegment(
            name=segment,
            type="dynamic",
            param_name=kind.name,
            param_type=kind.type,
            interception_marker=marker,
        )
    if kind.type is SegmentType.ROUTE_GROUP:
        return RouteSegment(name=segment, type="route-group", interception_marker=marker)
    if bare.startswith("@"):
        return RouteSegment(name=segment, type="parallel-route", interception_marker=marker)
    return RouteSegment(name=segment, type="static", interception_marker=marker)


@dataclass(frozen=True, slots=True)
class AppRoute:
    """A parsed pathname.

    Attributes:
        pathname: The pathname as given.
        normalized: Whether route groups and parallel routes were rejected.
        segments: Every parsed segment, in order.
        interception_marker: Marker of the intercepting segment, if any.
        intercepting_route: The route before the marker (interceptions only).
        intercepted_route: The route after the marker (interceptions only).
    """

    pathname: str
    normalized: bool
    segments: tuple[RouteSegment, ...]
    interception_marker: str | None = None
    intercepting_route: AppRoute | None = None
    intercepted_route: AppRoute | None = None
    _path: tuple[RouteSegment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        path = tuple(s for s in self.segments if s.contributes_to_path)
        object.__setattr__(self, "_path", path)

    @property
    def path_segments(self) -> tuple[str, ...]:
        """Tokens that occupy a URL position; groups and slots excluded."""
        return tuple(s.name for s in self._path)

    @property
    def dynamic_segments(self) -> tuple[RouteSegment, ...]:
        return tuple(s for s in self.segments if s.type == "dynamic")

    @property
    def is_interception(self) -> bool:
        return self.interception_marker is not None

    def is_placeholder(self, index: int) -> bool:
        """True if the path segment at *index* is a bracket placeholder.

        Out-of-range indexes are never placeholders.
        """
        if index < 0 or index >= len(self._path):
            return False
        return self._path[index].type == "dynamic"


def parse_app_route(pathname: str, normalized: bool = True) -> AppRoute:
    """Parse a pathname into an :class:`AppRoute`.

    Examples::

        parse_app_route("/blog/2023").path_segments      -> ("blog", "2023")
        parse_app_route("/blog/[slug]").is_placeholder(1) -> True
        parse_app_route("/(shop)/cart", normalized=False).path_segments -> ("cart",)

    Raises ``InvalidRouteError`` if a normalized pathname contains a route
    group or parallel route segment, or if an interception marker does
    not split the pathname into exactly two parts.
    """
    segments: list[RouteSegment] = []
    interception_marker: str | None = None
    intercepting_route: AppRoute | None = None
    intercepted_route: AppRoute | None = None

    for part in pathname.split("/"):
        segment = parse_route_segment(part)
        if segment is None:
            continue

        if normalized and not segment.contributes_to_path:
            msg = (
                f"{pathname!r} is being parsed as a normalized route, "
                f"but it has a {segment.type} segment {segment.name!r}."
            )
            raise InvalidRouteError(msg)

        segments.append(segment)

        if segment.interception_marker:
            parts = pathname.split(segment.interception_marker)
            if len(parts) != 2:
                raise InvalidRouteError(f"Invalid interception route: {pathname!r}")
            intercepting_route = parse_app_route(parts[0], normalized)
            intercepted_route = parse_app_route(parts[1], normalized)
            interception_marker = segment.interception_marker

    return AppRoute(
        pathname=pathname,
        normalized=normalized,
        segments=tuple(segments),
        interception_marker=interception_marker,
        intercepting_route=intercepting_route,
        intercepted_route=intercepted_route,
    )
