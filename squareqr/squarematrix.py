# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence, Self

from .backend import ArrayLike, ArrayNamespace, DType, working_dtype
from .densebuffer import DenseBuffer
from .errors import DimensionError

class ReadOnlySquareMatrix[T: ArrayLike]:
    """
    Square matrix backed by a dense buffer. This view only offers reading operations,
    it is handed out wherever the underlying storage must not be changed by the caller.
    Use :meth:`copy` to obtain a writable matrix.
    """

    _buffer: DenseBuffer[T]

    def __init__(self, buffer: DenseBuffer[T]) -> None:
        if not isinstance(buffer, DenseBuffer):
            raise TypeError(f"Expected a DenseBuffer, got {type(buffer).__name__}.")
        self._buffer = buffer

    #-------------------------------------------------------------------------
    #properties

    @property
    def dimension(self) -> int:
        """Number of rows and columns."""
        return self._buffer.dimension

    @property
    def namespace(self) -> ArrayNamespace[T]:
        """Array namespace of the underlying storage."""
        return self._buffer.namespace

    @property
    def dtype(self) -> DType:
        return self._buffer.dtype

    @property
    def read_only(self) -> bool:
        return True

    #-------------------------------------------------------------------------
    #methods

    def multiply(self, vector: T | Sequence[float]) -> T:
        """Matrix vector product :math:`y_i = \\sum_j M_{ij} v_j`."""
        xp = self.namespace
        dtype = working_dtype(xp, self.dtype)
        vec = xp.asarray(vector, dtype=dtype)
        if vec.ndim != 1 or vec.shape[0] != self.dimension:
            raise DimensionError(f"Expected a vector of length {self.dimension}, got shape {vec.shape}.")
        return xp.matmul(xp.astype(self._buffer.to_array(), dtype), vec)

    def transpose(self) -> Self:
        """Transposed matrix sharing the storage of this one."""
        return type(self)(self._buffer.transposed())

    def copy(self) -> "SquareMatrix[T]":
        """Writable matrix with its own storage."""
        return SquareMatrix(self._buffer.copy())

    def diagonal(self) -> T:
        """Copy of the main diagonal."""
        xp = self.namespace
        return xp.asarray(self._buffer.diagonal(), copy=True)

    def trace(self) -> float:
        xp = self.namespace
        return float(xp.sum(self._buffer.diagonal()))

    def to_array(self) -> T:
        """Two dimensional array with the entries of the matrix."""
        return self._buffer.to_array()

    #-------------------------------------------------------------------------
    #some magic

    def _split_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix entries are addressed by a (row, column) tuple.")
        return key

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._split_key(key)
        return self._buffer.get(i, j)

    def __matmul__(self, vector: T | Sequence[float]) -> T:
        return self.multiply(vector)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimension={self.dimension})"

class SquareMatrix[T: ArrayLike](ReadOnlySquareMatrix[T]):
    """
    Writable square matrix backed by a dense buffer.
    """

    @property
    def read_only(self) -> bool:
        return False

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._split_key(key)
        self._buffer.set(i, j, value)
