"""Loader tree nodes describing a page's nested layouts and parallel slots.

A node has a raw ``segment`` (``""``, ``"blog"``, ``"[slug]"``,
``"(marketing)"``, ``"(.)photo"`` ...) and an ordered mapping of named
slots.  The primary content slot (``"children"``) and parallel routes
(``"modal"``, ``"sidebar"``) are entries in the same mapping; insertion
order is preserved and is the order the resolver walks them in.

Trees are built by the bundler, not here.  :func:`parse_loader_tree`
adapts the shapes it hands over::

    ["", {"children": ["blog", {}, {}, None]}, {}, None]
    {"segment": "", "slots": {"children": {"segment": "blog"}}}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wren.errors import InvalidTreeError

PRIMARY_SLOT = "children"


@dataclass(frozen=True, slots=True)
class LoaderTree:
    """An immutable loader tree node.

    Attributes:
        segment: Raw segment descriptor for this level.
        slots: Read-only, insertion-ordered slot name -> child node.
    """

    segment: str
    slots: Mapping[str, LoaderTree] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", MappingProxyType(dict(self.slots)))


def create_loader_tree(
    segment: str,
    slots: Mapping[str, LoaderTree] | None = None,
    children: LoaderTree | None = None,
    *,
    primary_slot: str = PRIMARY_SLOT,
) -> LoaderTree:
    """Build a node; *children* is placed after the parallel slots."""
    routes = dict(slots or {})
    if children is not None:
        routes[primary_slot] = children
    return LoaderTree(segment, routes)


def parse_loader_tree(raw: Any) -> LoaderTree:
    """Convert a raw tree into :class:`LoaderTree` nodes.

    Accepts a ``LoaderTree`` (returned as is), a sequence whose first two
    items are the segment and the slot mapping (extra items such as
    modules are ignored), or a mapping with ``segment`` and optional
    ``slots`` keys.

    Raises ``InvalidTreeError`` for anything else.
    """
    if isinstance(raw, LoaderTree):
        return raw

    if isinstance(raw, Mapping):
        if "segment" not in raw:
            raise InvalidTreeError(f"Tree node mapping has no 'segment' key: {raw!r}")
        segment = raw["segment"]
        slots = raw.get("slots") or {}
    elif isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if len(raw) < 2:
            raise InvalidTreeError(f"Tree node needs [segment, slots, ...], got {raw!r}")
        segment, slots = raw[0], raw[1]
    else:
        raise InvalidTreeError(f"Unsupported tree node type: {type(raw).__name__}")

    if not isinstance(segment, str):
        raise InvalidTreeError(f"Tree segment must be a string, got {segment!r}")
    if not isinstance(slots, Mapping):
        raise InvalidTreeError(f"Slots of segment {segment!r} must be a mapping")

    return LoaderTree(
        segment,
        {str(name): parse_loader_tree(child) for name, child in slots.items()},
    )
