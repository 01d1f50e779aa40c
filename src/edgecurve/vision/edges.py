"""
Edge extraction by local gradient magnitude.

Central differences on channel-averaged luminance. Only interior pixels are
candidates; the 1 px border has no complete neighbourhood and is skipped.
"""

import numpy as np

from edgecurve.models import Point
from edgecurve.tracer import get_tracer, trace


def gradient_magnitude(buffer):
    """
    Compute gradient magnitude for interior pixels.

    Returns an array of shape (H-2, W-2) where entry [r, c] belongs to
    pixel (x=c+1, y=r+1). Images smaller than 3x3 give an empty array.
    """
    if buffer.width < 3 or buffer.height < 3:
        return np.zeros((0, 0), dtype=np.float64)

    gray = buffer.luminance()

    gx = gray[1:-1, 2:] - gray[1:-1, :-2]
    gy = gray[2:, 1:-1] - gray[:-2, 1:-1]

    return np.sqrt(gx * gx + gy * gy)


@trace(label="extract_edges")
def extract_edges(buffer, threshold):
    """
    Find edge pixels in a pixel buffer.

    Args:
        buffer: PixelBuffer to scan (not modified)
        threshold: gradient magnitude a pixel must exceed

    Returns:
        list of integer Points in row-major scan order
    """
    tracer = get_tracer()

    magnitude = gradient_magnitude(buffer)
    if magnitude.size == 0:
        tracer.event(f"Image too small for gradients: {buffer.width}x{buffer.height}")
        return []

    # np.nonzero walks rows first, which keeps scan order
    rows, cols = np.nonzero(magnitude > threshold)
    edges = [Point(int(c) + 1, int(r) + 1) for r, c in zip(rows, cols)]

    ratio = len(edges) / magnitude.size
    tracer.event(f"Edges: {len(edges)} of {magnitude.size} interior pixels ({ratio:.1%})")

    return edges
