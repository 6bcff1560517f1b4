"""Segment classification for loader tree nodes.

Maps a raw segment string to a :class:`SegmentKind`::

    ""              -> ROOT
    "(marketing)"   -> ROUTE_GROUP        name="marketing"
    "(.)photo"      -> INTERCEPTION       name="photo", marker="(.)"
    "[[...extra]]"  -> OPTIONAL_CATCHALL  name="extra"
    "[...tags]"     -> CATCHALL           name="tags"
    "[category]"    -> DYNAMIC            name="category"
    "blog"          -> STATIC             name="blog"

Patterns are checked in that precedence (parameters before parentheses),
so ``(.)``-prefixed segments are only ever interceptions and a group is
a parenthesised name with no leading dot run.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Longest first so "(..)(..)" wins over "(..)" and "(...)" over "(..)"
INTERCEPTION_ROUTE_MARKERS: tuple[str, ...] = ("(..)(..)", "(...)", "(..)", "(.)")

_OPTIONAL_CATCHALL_RE = re.compile(r"^\[\[\.\.\.([^\[\]]+)\]\]$")
_CATCHALL_RE = re.compile(r"^\[\.\.\.([^\[\]]+)\]$")
_DYNAMIC_RE = re.compile(r"^\[([^\[\]]+)\]$")
_ROUTE_GROUP_RE = re.compile(r"^\(([^.()][^()]*)\)$")


class SegmentType(Enum):
    """Variant tag of a classified segment."""

    ROOT = "root"
    ROUTE_GROUP = "route-group"
    INTERCEPTION = "interception"
    OPTIONAL_CATCHALL = "optional-catchall"
    CATCHALL = "catchall"
    DYNAMIC = "dynamic"
    STATIC = "static"


_PARAM_TYPES = frozenset({SegmentType.DYNAMIC, SegmentType.CATCHALL, SegmentType.OPTIONAL_CATCHALL})
_ZERO_DEPTH_TYPES = frozenset({SegmentType.ROOT, SegmentType.ROUTE_GROUP})


@dataclass(frozen=True, slots=True)
class SegmentKind:
    """A classified loader tree segment.

    Attributes:
        type: The variant.
        name: Param name for parameters, group name for route groups,
            the remainder after the marker for interceptions, the literal
            for static segments, ``""`` for the root.
        interception_marker: The ``(.)``-style prefix, interceptions only.
    """

    type: SegmentType
    name: str = ""
    interception_marker: str | None = None

    @property
    def is_param(self) -> bool:
        return self.type in _PARAM_TYPES

    @property
    def depth_contribution(self) -> int:
        """Path segments consumed by this node for the nodes beneath it."""
        return 0 if self.type in _ZERO_DEPTH_TYPES else 1


def interception_marker_of(segment: str) -> str | None:
    """Return the interception marker prefixing *segment*, if any."""
    for marker in INTERCEPTION_ROUTE_MARKERS:
        if segment.startswith(marker):
            return marker
    return None


def classify(segment: str) -> SegmentKind:
    """Classify a raw loader tree segment. Never fails; unknown is static."""
    if segment == "":
        return SegmentKind(SegmentType.ROOT)

    match = _OPTIONAL_CATCHALL_RE.match(segment)
    if match:
        return SegmentKind(SegmentType.OPTIONAL_CATCHALL, match.group(1))

    match = _CATCHALL_RE.match(segment)
    if match:
        return SegmentKind(SegmentType.CATCHALL, match.group(1))

    match = _DYNAMIC_RE.match(segment)
    if match:
        return SegmentKind(SegmentType.DYNAMIC, match.group(1))

    marker = interception_marker_of(segment)
    if marker is not None:
        return SegmentKind(
            SegmentType.INTERCEPTION,
            segment[len(marker) :],
            interception_marker=marker,
        )

    match = _ROUTE_GROUP_RE.match(segment)
    if match:
        return SegmentKind(SegmentType.ROUTE_GROUP, match.group(1))

    return SegmentKind(SegmentType.STATIC, segment)
