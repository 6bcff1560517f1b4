"""``wren classify`` — show how loader tree segments are classified."""

import argparse

from wren.routing.segments import classify


def run_classify(args: argparse.Namespace) -> None:
    """Print TYPE, NAME and DEPTH for each segment in ``args.segments``."""
    rows: list[tuple[str, str, str, str]] = []
    for segment in args.segments:
        kind = classify(segment)
        name = kind.name
        if kind.interception_marker:
            name = f"{name} ({kind.interception_marker})"
        rows.append((repr(segment), kind.type.value, name, str(kind.depth_contribution)))

    max_segment = max(max(len(r[0]) for r in rows), 7)  # "SEGMENT" header
    max_type = max(max(len(r[1]) for r in rows), 4)  # "TYPE" header
    max_name = max(max(len(r[2]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_segment}}}  {{:<{max_type}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("SEGMENT", "TYPE", "NAME", "DEPTH"))
    print("-" * min(max_segment + max_type + max_name + 11, 80))
    for row in rows:
        print(fmt.format(*row))
