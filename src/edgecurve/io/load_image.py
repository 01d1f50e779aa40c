"""
Image loading for edgecurve.

Decodes image files into read-only PixelBuffers for the CLI. The core
pipeline itself only ever receives a PixelBuffer.
"""

import os

import cv2

from edgecurve.models import PixelBuffer
from edgecurve.tracer import get_tracer, trace


SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".tiff", ".tif", ".bmp")


@trace(label="load_image")
def load_image(path):
    """
    Load an image from disk as an RGB PixelBuffer.

    Raises FileNotFoundError if path does not exist.
    Raises ValueError if the file cannot be decoded.
    """
    tracer = get_tracer()

    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported image format: {path}")

    # OpenCV decodes to BGR
    img_bgr = cv2.imread(path, cv2.IMREAD_COLOR)
    if img_bgr is None:
        raise ValueError(f"Failed to load image: {path}")

    buffer = PixelBuffer(cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB))
    tracer.event(f"Loaded image: {buffer.width}x{buffer.height}")

    return buffer
