# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging
from types import NoneType

from .backend import ArrayLike, ArrayNamespace, working_dtype, device
from .densebuffer import DenseBuffer, column_major
from .squarematrix import ReadOnlySquareMatrix
from .squareqrdecomposition import SquareQRDecomposition
from .options import OptionType, get_options
from .utils import check_non_neg

logger = logging.getLogger(__name__)

def qr_decomposition[T: ArrayLike](matrix: ReadOnlySquareMatrix[T]) -> SquareQRDecomposition[T]:
    """
    QR decomposition of a square matrix, using the factorization options of the current thread.
    """
    if not isinstance(matrix, ReadOnlySquareMatrix):
        raise TypeError(f"Expected a square matrix, got {type(matrix).__name__}.")
    opts = get_options(matrix.namespace, OptionType.FACTORIZATION)
    qt, r = householder_qr(matrix._buffer, opts.rtol)
    return SquareQRDecomposition(qt, r, matrix.dimension)

def householder_qr[T: ArrayLike](buffer: DenseBuffer[T], rtol: float | NoneType = None) -> tuple[T, T]:
    """
    Factor the matrix of the buffer into :math:`Q^T A = R` with Householder reflections.
    Returns the column-major stores of :math:`Q^T` and :math:`R`; the buffer itself is left untouched.

    Each reflection is chosen to add to the magnitude of the pivot. A column whose remaining
    part has a norm at or below rtol times the norm of the same column of the input is treated
    as zero and produces an exact zero on the diagonal of R. The sign of the last row of R and
    :math:`Q^T` is fixed such that :math:`\\det Q = 1`.
    """
    xp = buffer.namespace
    n = buffer.dimension
    dtype = working_dtype(xp, buffer.dtype)
    work = xp.astype(buffer.to_array(), dtype)
    qt = xp.eye(n, dtype=dtype, device=device(work))

    if isinstance(rtol, NoneType):
        rtol = 8 * n * float(xp.finfo(dtype).eps)
    check_non_neg("rtol", rtol)
    thresholds = [rtol * _norm(xp, work[:, k]) for k in range(n)]

    reflections = 0
    zero_columns = []
    for k in range(n):
        x = work[k:, k]
        sigma = _norm(xp, x)
        if sigma <= thresholds[k]:
            work[k:, k] = 0.0
            zero_columns.append(k)
            continue
        if k == n-1 or bool(xp.all(x[1:] == 0.0)):
            continue

        pivot = float(x[0])
        alpha = -sigma if pivot >= 0.0 else sigma
        v = xp.asarray(x, copy=True)
        v[0] = pivot - alpha
        u = v / _norm(xp, v)

        work[k:, k:] = _reflect(xp, u, work[k:, k:])
        qt[k:, :] = _reflect(xp, u, qt[k:, :])
        work[k, k] = alpha
        work[k+1:, k] = 0.0
        reflections += 1

    # every reflection flips the sign of det(Q)
    if reflections % 2 == 1:
        work[n-1, :] = -work[n-1, :]
        qt[n-1, :] = -qt[n-1, :]

    logger.debug("Householder QR of dimension %d: %d reflections, rtol %g, zero columns %s",
                 n, reflections, rtol, zero_columns)
    return column_major(qt), column_major(xp.triu(work))

def _norm[T: ArrayLike](xp: ArrayNamespace[T], x: T) -> float:
    """Euclidean norm, scaled by the largest magnitude so that squaring can not overflow."""
    scale = float(xp.max(xp.abs(x)))
    if scale == 0.0:
        return 0.0
    y = x / scale
    return scale * float(xp.sqrt(xp.sum(y * y)))

def _reflect[T: ArrayLike](xp: ArrayNamespace[T], u: T, block: T) -> T:
    """Apply :math:`H = I - 2 u u^T` with a unit vector u from the left."""
    return block - 2.0 * u[:, xp.newaxis] * xp.matmul(u, block)[xp.newaxis, :]
