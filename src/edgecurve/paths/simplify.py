"""
Path simplification using the Ramer-Douglas-Peucker algorithm.

Reduces the number of points while keeping every dropped point within
epsilon of the simplified polyline. Uses an explicit work stack so long
paths cannot exhaust the interpreter's recursion limit.
"""

import numpy as np

from edgecurve.tracer import get_tracer, trace


@trace(label="simplify_paths")
def simplify_paths(paths, epsilon):
    """
    Simplify several paths with the same tolerance.

    Args:
        paths: list of paths, each a list of Points
        epsilon: maximum perpendicular distance threshold

    Returns:
        list of simplified paths, same order as the input
    """
    tracer = get_tracer()

    simplified = [simplify_path(path, epsilon) for path in paths]

    before = sum(len(p) for p in paths)
    after = sum(len(p) for p in simplified)
    reduction = 1 - (after / before) if before > 0 else 0
    tracer.event(f"Simplified: {before} -> {after} points ({reduction:.1%} reduction)")

    return simplified


def simplify_path(path, epsilon):
    """
    Douglas-Peucker simplification of a single path.

    The result is a subsequence of the input points that always keeps the
    first and last point. Paths with two or fewer points come back unchanged.
    """
    if len(path) <= 2:
        return list(path)

    coords = np.asarray(path, dtype=np.float64)
    keep = np.zeros(len(path), dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, len(path) - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        distances = perpendicular_distances(coords[start + 1:end], coords[start], coords[end])
        offset = int(np.argmax(distances))
        dmax = distances[offset]

        if dmax > epsilon:
            index = start + 1 + offset
            keep[index] = True
            stack.append((index, end))
            stack.append((start, index))

    return [path[i] for i in np.flatnonzero(keep)]


def perpendicular_distances(points, start, end):
    """
    Distance from each point to the infinite line through start and end.

    A zero-length reference segment gives all-zero distances.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = np.hypot(dx, dy)

    if length == 0:
        return np.zeros(len(points), dtype=np.float64)

    cross = dy * points[:, 0] - dx * points[:, 1] + end[0] * start[1] - end[1] * start[0]
    return np.abs(cross) / length
