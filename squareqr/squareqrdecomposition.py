# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence
from dataclasses import dataclass

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, length
from .densebuffer import DenseBuffer
from .squarematrix import ReadOnlySquareMatrix, SquareMatrix
from .triangularsolver import solve_upper_triangular, solve_lower_triangular
from .options import OptionType, get_options
from .errors import DimensionError

@dataclass(frozen=True, init=False, eq=False)
class SquareQRDecomposition[T: ArrayLike]:
    """
    QR decomposition :math:`A=QR` of a square matrix into an orthogonal matrix :math:`Q` and an
    upper triangular matrix :math:`R`. It is used to solve linear systems and to compute the
    determinant and the inverse of :math:`A`. The decomposition never changes after it has been
    created, so it can be queried from several threads at once.

    Instances are created by :func:`squareqr.qrdecomposition.qr_decomposition`.
    """

    #: Number of rows and columns of the decomposed matrix.
    dimension: int
    #: Column-major storage of the transposed orthogonal factor.
    _qt_store: T
    #: Column-major storage of the triangular factor.
    _r_store: T

    def __init__(self, qt_store: T, r_store: T, dimension: int) -> None:
        if dimension <= 0:
            raise DimensionError(f"Dimension must be above zero, got {dimension}.")
        for name, store in (("Q", qt_store), ("R", r_store)):
            if store.ndim != 1 or length(store) != dimension*dimension:
                raise DimensionError(f"Storage of {name} must hold {dimension*dimension} entries.")
        object.__setattr__(self, "dimension", dimension)
        object.__setattr__(self, "_qt_store", qt_store)
        object.__setattr__(self, "_r_store", r_store)

    #-------------------------------------------------------------------------
    #factors

    @property
    def q(self) -> ReadOnlySquareMatrix[T]:
        """The orthogonal matrix :math:`Q` (read-only, shares the storage of the decomposition)."""
        n = self.dimension
        return ReadOnlySquareMatrix(DenseBuffer(self._qt_store, n, 0, n, 1))

    @property
    def r(self) -> ReadOnlySquareMatrix[T]:
        """The upper triangular matrix :math:`R` (read-only, shares the storage of the decomposition)."""
        return ReadOnlySquareMatrix(self._r_buffer())

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return namespace_of_arrays(self._qt_store)

    #-------------------------------------------------------------------------
    #methods

    def solve(self, rhs: T | Sequence[float]) -> T:
        """Solve :math:`Ax=b` for the right hand side :math:`b`."""
        xp = self.namespace
        y = self._vector(rhs)
        y = xp.matmul(DenseBuffer(self._qt_store, self.dimension).to_array(), y)
        solve_upper_triangular(self._r_buffer(), y, 0, self._tolerance())
        return y

    def solve_transposed(self, rhs: T | Sequence[float]) -> T:
        """Solve :math:`A^Tx=b` for the right hand side :math:`b`."""
        xp = self.namespace
        y = self._vector(rhs)
        solve_lower_triangular(self._r_buffer().transposed(), y, 0, self._tolerance())
        return xp.matmul(self.q.to_array(), y)

    def determinant(self) -> float:
        """
        Determinant of the decomposed matrix, the product of the diagonal of :math:`R`.
        A singular matrix gives exactly zero.
        """
        xp = self.namespace
        return float(xp.prod(self._r_buffer().diagonal()))

    def inverse(self) -> SquareMatrix[T]:
        """Inverse of the decomposed matrix, :math:`A^{-1} = R^{-1} Q^T`."""
        xp = self.namespace
        n = self.dimension
        tolerance = self._tolerance()
        store = xp.asarray(self._qt_store, copy=True)
        for c in range(n):
            solve_upper_triangular(self._r_buffer(), store, c*n, tolerance)
        return SquareMatrix(DenseBuffer(store, n))

    #-------------------------------------------------------------------------
    #helpers

    def _r_buffer(self) -> DenseBuffer[T]:
        return DenseBuffer(self._r_store, self.dimension)

    def _tolerance(self) -> float:
        return get_options(self.namespace, OptionType.SOLVE).tolerance

    def _vector(self, rhs: T | Sequence[float]) -> T:
        xp = self.namespace
        y = xp.asarray(rhs, dtype=self._qt_store.dtype, copy=True)
        if y.ndim != 1 or y.shape[0] != self.dimension:
            raise DimensionError(f"Expected a vector of length {self.dimension}, got shape {y.shape}.")
        return y

    #-------------------------------------------------------------------------
    #some magic

    def __repr__(self) -> str:
        return f"SquareQRDecomposition(dimension={self.dimension})"
