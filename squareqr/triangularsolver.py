# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Substitution kernels for triangular systems. Both kernels read the matrix straight
from the storage of a dense buffer and overwrite the right hand side
``y[offset:offset+dimension]`` with the solution. Only the triangle that belongs to
the system is read, the other one may hold arbitrary values.
"""

from .backend import ArrayLike
from .densebuffer import DenseBuffer
from .errors import SingularMatrixError
from .utils import check_non_neg, check_vector

def solve_upper_triangular[T: ArrayLike](r: DenseBuffer[T], y: T, offset: int = 0, tolerance: float = 0.0) -> None:
    """Solve :math:`Rx=y` in place by back substitution."""
    _check_system(r, y, offset, tolerance)
    xp = r.namespace
    n, rs, cs = r.dimension, r.row_stride, r.col_stride
    store = r.store
    for i in reversed(range(n)):
        start = r.offset + i*rs + (i+1)*cs
        stop = start + (n-i-1)*cs
        acc = y[offset+i] - xp.sum(store[start:stop:cs] * y[offset+i+1:offset+n])
        y[offset+i] = acc / store[r.offset + i*(rs+cs)]

def solve_lower_triangular[T: ArrayLike](l: DenseBuffer[T], y: T, offset: int = 0, tolerance: float = 0.0) -> None:
    """Solve :math:`Lx=y` in place by forward substitution."""
    _check_system(l, y, offset, tolerance)
    xp = l.namespace
    n, rs, cs = l.dimension, l.row_stride, l.col_stride
    store = l.store
    for i in range(n):
        start = l.offset + i*rs
        stop = start + i*cs
        acc = y[offset+i] - xp.sum(store[start:stop:cs] * y[offset:offset+i])
        y[offset+i] = acc / store[l.offset + i*(rs+cs)]

def _check_system[T: ArrayLike](mat: DenseBuffer[T], y: T, offset: int, tolerance: float) -> None:
    check_non_neg("tolerance", tolerance)
    check_vector(y, mat.dimension, offset)
    diag = mat.diagonal()
    for i in range(mat.dimension):
        value = float(diag[i])
        if abs(value) <= tolerance:
            raise SingularMatrixError(f"Matrix is singular, diagonal entry {i} is {value}.")
