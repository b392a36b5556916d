# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from types import NoneType
from dataclasses import dataclass
from math import gcd
import array_api_compat as api

from .backend import ArrayLike, ArrayNamespace, DType, namespace_of_arrays, device, length
from .errors import DimensionError

@dataclass(frozen=True, init=False, eq=False)
class DenseBuffer[T: ArrayLike]:
    """
    Square block of a flat array. Element :math:`(i, j)` is stored at
    ``store[offset + i*row_stride + j*col_stride]``, so several buffers can
    look at the same storage with different strides without copying it.
    Buffers created by this package are column-major, i.e. ``row_stride=1``
    and ``col_stride=dimension``.
    """

    #: Flat one dimensional storage, possibly shared with other buffers.
    store: T
    #: Number of rows and columns.
    dimension: int
    #: Position of element (0, 0) in the storage.
    offset: int
    #: Distance between two consecutive rows.
    row_stride: int
    #: Distance between two consecutive columns.
    col_stride: int

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self,
                 store: T,
                 dimension: int,
                 offset: int = 0,
                 row_stride: int = 1,
                 col_stride: int | NoneType = None) -> None:
        if isinstance(col_stride, NoneType):
            col_stride = dimension
        self._check_layout(store, dimension, offset, row_stride, col_stride)
        object.__setattr__(self, "store", store)
        object.__setattr__(self, "dimension", dimension)
        object.__setattr__(self, "offset", offset)
        object.__setattr__(self, "row_stride", row_stride)
        object.__setattr__(self, "col_stride", col_stride)

    def _check_layout(self, store: T, dimension: int, offset: int, row_stride: int, col_stride: int) -> None:
        if not api.is_array_api_obj(store):
            raise TypeError("Storage must be an array of a supported array library.")
        if store.ndim != 1:
            raise DimensionError(f"Storage must be one dimensional, got {store.ndim} dimensions.")
        if dimension <= 0:
            raise DimensionError(f"Dimension must be above zero, got {dimension}.")
        if offset < 0:
            raise DimensionError(f"Offset must not be negative, got {offset}.")
        if row_stride <= 0 or col_stride <= 0:
            raise DimensionError(f"Strides must be above zero, got ({row_stride}, {col_stride}).")
        # (i, j) and (i+di, j-dj) share an address iff row_stride*di == col_stride*dj
        g = gcd(row_stride, col_stride)
        if col_stride // g < dimension and row_stride // g < dimension:
            raise DimensionError(f"Strides ({row_stride}, {col_stride}) address overlapping elements "\
                                 f"for dimension {dimension}.")
        last = offset + (dimension-1)*(row_stride+col_stride)
        if last >= length(store):
            raise DimensionError(f"Storage of length {length(store)} is too short for dimension {dimension} "\
                                 f"with offset {offset} and strides ({row_stride}, {col_stride}).")

    #-------------------------------------------------------------------------
    #properties

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return namespace_of_arrays(self.store)

    @property
    def dtype(self) -> DType:
        return self.store.dtype

    #-------------------------------------------------------------------------
    #element access

    def index(self, i: int, j: int) -> int:
        """Position of element (i, j) in the storage."""
        n = self.dimension
        if not 0 <= i < n:
            raise IndexError(f"Row index {i} out of range for dimension {n}.")
        if not 0 <= j < n:
            raise IndexError(f"Column index {j} out of range for dimension {n}.")
        return self.offset + i*self.row_stride + j*self.col_stride

    def get(self, i: int, j: int) -> float:
        return float(self.store[self.index(i, j)])

    def set(self, i: int, j: int, value: float) -> None:
        self.store[self.index(i, j)] = value

    #-------------------------------------------------------------------------
    #views and copies

    def transposed(self) -> "DenseBuffer[T]":
        """View of the transposed matrix on the same storage."""
        return DenseBuffer(self.store, self.dimension, self.offset, self.col_stride, self.row_stride)

    def diagonal(self) -> T:
        """Strided view of the main diagonal."""
        step = self.row_stride + self.col_stride
        stop = self.offset + (self.dimension-1)*step + 1
        return self.store[self.offset:stop:step]

    def to_array(self) -> T:
        """Gather the logical contents into a new two dimensional array."""
        xp = self.namespace
        n = self.dimension
        rows = xp.arange(n, device=device(self.store)) * self.row_stride
        cols = xp.arange(n, device=device(self.store)) * self.col_stride
        idxs = self.offset + rows[:, xp.newaxis] + cols[xp.newaxis, :]
        data = xp.take(self.store, xp.reshape(idxs, (n*n,)), axis=0)
        return xp.reshape(data, (n, n))

    def copy(self) -> "DenseBuffer[T]":
        """Independent compact column-major buffer with the same contents."""
        return DenseBuffer(column_major(self.to_array()), self.dimension)

    #-------------------------------------------------------------------------
    #some magic

    def __repr__(self) -> str:
        return f"DenseBuffer(dimension={self.dimension}, offset={self.offset}, "\
               f"row_stride={self.row_stride}, col_stride={self.col_stride})"

def column_major[T: ArrayLike](data: T) -> T:
    """Flatten a square two dimensional array into column-major order."""
    xp = namespace_of_arrays(data)
    rows, cols = data.shape
    if rows != cols:
        raise DimensionError(f"Expected a square matrix, got shape {data.shape}.")
    return xp.reshape(xp.permute_dims(data, (1, 0)), (rows*cols,))
