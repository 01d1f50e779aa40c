"""
Dense linear solver: Gaussian elimination with partial pivoting.
"""

import numpy as np

from edgecurve.errors import SingularMatrixError


def solve_linear_system(A, B):
    """
    Solve A @ x = B for a square matrix A.

    At each step the row with the largest magnitude in the pivot column
    (at or below the diagonal) is swapped into place, along with its B entry,
    then the column is eliminated from the rows below. The solution is
    recovered by back substitution. Inputs are copied, not modified.

    Raises:
        ValueError: if A is not square or B does not match its order
        SingularMatrixError: on a zero pivot or a non-finite solution
    """
    a = np.array(A, dtype=np.float64)
    b = np.array(B, dtype=np.float64)

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {a.shape}")
    n = a.shape[0]
    if b.shape != (n,):
        raise ValueError(f"Right-hand side must have shape ({n},), got {b.shape}")

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(a[i:, i])))
        if pivot_row != i:
            a[[i, pivot_row]] = a[[pivot_row, i]]
            b[[i, pivot_row]] = b[[pivot_row, i]]

        pivot = a[i, i]
        if pivot == 0:
            raise SingularMatrixError(f"Zero pivot in column {i}")

        factors = a[i + 1:, i] / pivot
        a[i + 1:, i:] -= np.outer(factors, a[i, i:])
        b[i + 1:] -= factors * b[i]

    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = (b[i] - a[i, i + 1:] @ x[i + 1:]) / a[i, i]

    if not np.all(np.isfinite(x)):
        raise SingularMatrixError("Solution contains non-finite values")

    return x
