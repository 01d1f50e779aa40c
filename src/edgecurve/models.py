"""
Data models for edgecurve.

Points and paths are lightweight tuples/lists so the per-pixel stages stay
fast; fitting results are validated, immutable Pydantic models.
"""

from enum import Enum
from typing import List, NamedTuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from edgecurve.errors import InvalidBufferError


INSUFFICIENT_DATA_FORMULA = "Insufficient Data"
SINGULAR_FIT_FORMULA = "Singular Fit"


class Point(NamedTuple):
    """A coordinate pair in pixel space."""
    x: Union[int, float]
    y: Union[int, float]


# Aliases used in signatures
Path = List[Point]
EdgeSet = List[Point]


class ScanMode(str, Enum):
    """Scan presets controlling path chaining and simplification strength."""
    NATURAL = "natural"
    ARCHITECTURAL = "architectural"


class CurveKind(str, Enum):
    """Family of the fitted curve. Only polynomial fits are produced."""
    POLYNOMIAL = "polynomial"
    SINE = "sine"


class FitStatus(str, Enum):
    """Outcome of a single fit."""
    OK = "ok"
    INSUFFICIENT_DATA = "insufficient_data"
    SINGULAR = "singular"


class FittingResult(BaseModel):
    """Fitted curve for one selected edge path."""
    formula: str
    curve: List[Point] = Field(default_factory=list)
    coefficients: List[float] = Field(default_factory=list)  # normalized space, index i -> x^i
    kind: CurveKind = CurveKind.POLYNOMIAL
    status: FitStatus = FitStatus.OK
    degree: int = Field(default=0, ge=0)
    source_length: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_valid(self):
        """True when the fit produced usable coefficients."""
        return self.status == FitStatus.OK


class PixelBuffer:
    """
    Read-only RGB(A) pixel grid.

    Wraps an (H, W, 3) or (H, W, 4) array. The stored array is a read-only
    view, so the caller's data is never modified through the buffer.
    """

    def __init__(self, data):
        arr = np.asarray(data)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidBufferError(
                f"Expected pixel data of shape (H, W, 3) or (H, W, 4), got {arr.shape}"
            )
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidBufferError(f"Pixel data is empty: {arr.shape}")

        view = arr.view()
        view.flags.writeable = False
        self._data = view

    @property
    def width(self):
        return self._data.shape[1]

    @property
    def height(self):
        return self._data.shape[0]

    @property
    def data(self):
        """The underlying read-only array, indexed [y, x, channel]."""
        return self._data

    def get_pixel(self, x, y):
        """Return (r, g, b, a) at column x, row y. Alpha is 255 for RGB data."""
        px = self._data[y, x].tolist()
        alpha = px[3] if len(px) == 4 else 255
        return px[0], px[1], px[2], alpha

    def luminance(self):
        """Per-pixel mean of the three color channels as float64, shape (H, W)."""
        return self._data[:, :, :3].astype(np.float64).mean(axis=2)

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"
