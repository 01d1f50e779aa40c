"""
Least-squares polynomial fitting for edge paths.

Points are normalized to [0, 1] x [0, 1] by image size before fitting so
high powers of x stay well scaled. Coefficients are solved from the normal
equations (Vandermonde form), then a curve is sampled back in pixel space
for overlay rendering.
"""

import numpy as np

from edgecurve.errors import SingularMatrixError
from edgecurve.fitting.linear_solver import solve_linear_system
from edgecurve.models import (
    INSUFFICIENT_DATA_FORMULA, SINGULAR_FIT_FORMULA,
    CurveKind, FitStatus, FittingResult, Point,
)
from edgecurve.tracer import get_tracer


MAX_DEGREE = 12
DEFAULT_SAMPLE_STEP = 5


def fit_polynomial(points, degree, width, height, sample_step=DEFAULT_SAMPLE_STEP, source_length=None):
    """
    Fit y = sum(c_i * x^i) to points by ordinary least squares.

    Args:
        points: list of Points in pixel space
        degree: polynomial degree (>= 0)
        width, height: image size used for normalization and sampling
        sample_step: pixel spacing of the sampled curve
        source_length: length of the path the points came from, recorded
                       on the result (defaults to len(points))

    Returns:
        FittingResult. Too few points gives an INSUFFICIENT_DATA result and a
        rank-deficient system gives a SINGULAR one; both have empty curve and
        coefficients.
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive, got {width}x{height}")

    tracer = get_tracer()
    if source_length is None:
        source_length = len(points)

    if len(points) < degree + 1:
        tracer.event(f"Insufficient data: {len(points)} points for degree {degree}", level="DEBUG")
        return _sentinel(INSUFFICIENT_DATA_FORMULA, FitStatus.INSUFFICIENT_DATA, degree, source_length)

    coords = np.asarray(points, dtype=np.float64)
    xs = coords[:, 0] / width
    ys = coords[:, 1] / height

    # fewer distinct abscissas than unknowns leaves the system rank deficient;
    # rounding can hide that behind a tiny non-zero pivot
    distinct = len(np.unique(xs))
    if distinct < degree + 1:
        tracer.event(f"Singular fit: {distinct} distinct x values for degree {degree}", level="WARN")
        return _sentinel(SINGULAR_FIT_FORMULA, FitStatus.SINGULAR, degree, source_length)

    A, B = build_normal_equations(xs, ys, degree)

    try:
        coefficients = solve_linear_system(A, B)
    except SingularMatrixError as e:
        tracer.event(f"Singular fit for degree {degree}: {e}", level="WARN")
        return _sentinel(SINGULAR_FIT_FORMULA, FitStatus.SINGULAR, degree, source_length)

    coefficients = coefficients.tolist()

    return FittingResult(
        formula=format_formula(coefficients),
        curve=sample_curve(coefficients, width, height, step=sample_step),
        coefficients=coefficients,
        kind=CurveKind.POLYNOMIAL,
        status=FitStatus.OK,
        degree=degree,
        source_length=source_length,
    )


def build_normal_equations(xs, ys, degree):
    """
    Build (X^T X, X^T y) for a polynomial of the given degree.

    A[i][j] = sum(x^(i+j)), B[i] = sum(x^i * y).
    """
    n = degree + 1
    # power sums for exponents 0 .. 2*degree; 0**0 == 1 as required
    power_sums = np.array([np.sum(xs ** k) for k in range(2 * n - 1)])

    A = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        A[i, :] = power_sums[i:i + n]

    B = np.array([np.sum(xs ** i * ys) for i in range(n)])

    return A, B


def format_formula(coefficients):
    """
    Render coefficients as a display formula, highest power first.

    Example: [1, -0.5, 0.25] -> "f(x) = 0.25x^{2} + -0.50x + 1.00"
    """
    terms = []
    for i, c in enumerate(coefficients):
        value = f"{c:.2f}"
        if i == 0:
            terms.append(value)
        elif i == 1:
            terms.append(f"{value}x")
        else:
            terms.append(f"{value}x^{{{i}}}")

    return "f(x) = " + " + ".join(reversed(terms))


def evaluate_polynomial(coefficients, x):
    """Evaluate sum(c_i * x^i) by direct power summation."""
    total = 0.0
    for i, c in enumerate(coefficients):
        total += c * x ** i
    return total


def sample_curve(coefficients, width, height, step=DEFAULT_SAMPLE_STEP):
    """
    Sample the fitted curve in pixel space.

    x runs over integers 0, step, 2*step, ... up to and including width.
    """
    if step < 1:
        raise ValueError(f"sample step must be >= 1, got {step}")

    curve = []
    x = 0
    while x <= width:
        ny = evaluate_polynomial(coefficients, x / width)
        curve.append(Point(x, ny * height))
        x += step
    return curve


def _sentinel(formula, status, degree, source_length):
    return FittingResult(
        formula=formula,
        curve=[],
        coefficients=[],
        kind=CurveKind.POLYNOMIAL,
        status=status,
        degree=degree,
        source_length=source_length,
    )
