"""
Greedy segmentation of edge points into paths.

Points are sorted by x and chained left to right: each point joins the
current path if it lies within max_gap of the last point appended to it.
This is a single-pass heuristic, not connected-component tracing. Separate
structures at similar x can be chained together, and a curve that bends
back in x can be split.
"""

import math

from edgecurve.tracer import get_tracer, trace


MIN_PATH_LENGTH = 20


def _distance(a, b):
    return math.hypot(b[0] - a[0], b[1] - a[1])


@trace(label="segment_edges")
def segment_edges(edges, max_gap, min_length=MIN_PATH_LENGTH):
    """
    Partition edge points into contiguous paths.

    Args:
        edges: list of Points (any order)
        max_gap: a point joins the current path if its distance to the
                 path's last point is strictly less than this
        min_length: paths with this many points or fewer are dropped

    Returns:
        list of paths (lists of Points) in left-to-right commit order
    """
    tracer = get_tracer()

    if not edges:
        return []

    # sorted() is stable, so equal x keeps scan order
    ordered = sorted(edges, key=lambda p: p[0])

    paths = []
    dropped = 0
    current = [ordered[0]]

    for point in ordered[1:]:
        if _distance(current[-1], point) < max_gap:
            current.append(point)
            continue

        if len(current) > min_length:
            paths.append(current)
        else:
            dropped += 1
        current = [point]

    if len(current) > min_length:
        paths.append(current)
    else:
        dropped += 1

    tracer.event(f"Segmented {len(edges)} points into {len(paths)} paths ({dropped} short fragments dropped)")

    return paths


def select_top_paths(paths, n=5):
    """Return at most n paths, longest first. Equal lengths keep input order."""
    if n <= 0:
        return []
    return sorted(paths, key=len, reverse=True)[:n]
