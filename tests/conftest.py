"""Pytest fixtures for edgecurve tests."""

import os
import tempfile

import cv2
import numpy as np
import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def uniform_gray_image():
    """A 10x10 uniform mid-gray RGB image."""
    return np.full((10, 10, 3), 128, dtype=np.uint8)


@pytest.fixture
def vertical_step_image():
    """20x20 image: columns 0-4 black, columns 5-19 white."""
    img = np.zeros((20, 20, 3), dtype=np.uint8)
    img[:, 5:] = 255
    return img


@pytest.fixture
def horizontal_line_image():
    """A white image with a single 3 px black horizontal line at y=50."""
    img = np.ones((100, 200, 3), dtype=np.uint8) * 255
    cv2.line(img, (20, 50), (180, 50), (0, 0, 0), 3)
    return img


@pytest.fixture
def staggered_lines_image():
    """
    Seven short horizontal lines of increasing length, separated by
    12 px horizontal gaps so each becomes its own path.
    """
    img = np.ones((60, 360, 3), dtype=np.uint8) * 255
    x = 10
    for i in range(7):
        length = 20 + 4 * i
        cv2.line(img, (x, 30), (x + length, 30), (0, 0, 0), 1)
        x += length + 12
    return img


@pytest.fixture
def default_config():
    """Create default pipeline configuration."""
    from edgecurve.config import PipelineConfig
    return PipelineConfig()


@pytest.fixture
def line_input_file(temp_dir, horizontal_line_image):
    """Write the horizontal line image to disk."""
    path = os.path.join(temp_dir, "line_input.png")
    cv2.imwrite(path, cv2.cvtColor(horizontal_line_image, cv2.COLOR_RGB2BGR))
    return path
