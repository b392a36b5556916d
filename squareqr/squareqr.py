# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Literal, Sequence, overload, Any, Type, Optional
from types import NoneType
from dataclasses import dataclass
import h5py

from .backend import ArrayNamespace, get_namespace, working_dtype, length
from .densebuffer import DenseBuffer, column_major
from .squarematrix import ReadOnlySquareMatrix, SquareMatrix
from .squareqrdecomposition import SquareQRDecomposition
from .qrdecomposition import qr_decomposition
from .errors import DimensionError
from .options import FactorizationOptions, SolveOptions, OptionType, set_options, get_options

from .io import write as _write
from .io import read as _read

# Construction wrapper
@dataclass(frozen=True)
class SquareQR[NDArray: Any]:

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

    #-------------------------------------------------------------------------------------------------
    # storage

    def dense_buffer(
            self,
            store: NDArray | Sequence[float],
            dimension: int,
            offset: int = 0,
            row_stride: int = 1,
            col_stride: Optional[int] = None) -> DenseBuffer[NDArray]:
        """
        Square block of a flat array, element (i, j) is located at ``offset + i*row_stride + j*col_stride``.
        Arrays of the namespace are used without copying.
        """
        return DenseBuffer(self.namespace.asarray(store), dimension, offset, row_stride, col_stride)

    @overload
    def square_matrix(self, data: NDArray | Sequence[Sequence[float]], /) -> SquareMatrix[NDArray]: ...
    @overload
    def square_matrix(self, store: NDArray | Sequence[float], dimension: int, /) -> SquareMatrix[NDArray]: ...
    # implementation
    def square_matrix(self, data: Any, dimension: int | NoneType = None, /) -> SquareMatrix[NDArray]:
        """
        Writable square matrix. A two dimensional input is copied into new storage. A flat input
        together with a dimension is used as column-major storage of exactly dimension**2 entries.
        """
        xp = self.namespace
        if isinstance(dimension, NoneType):
            arr = xp.asarray(data, copy=True)
            if arr.ndim != 2:
                raise DimensionError(f"Expected a two dimensional array, got {arr.ndim} dimensions.")
            arr = xp.astype(arr, working_dtype(xp, arr.dtype))
            return SquareMatrix(DenseBuffer(column_major(arr), arr.shape[0]))

        if dimension <= 0:
            raise DimensionError(f"Dimension must be above zero, got {dimension}.")
        store = xp.asarray(data)
        if store.ndim != 1 or length(store) != dimension*dimension:
            raise DimensionError(f"Storage of shape {store.shape} does not hold {dimension*dimension} entries.")
        return SquareMatrix(DenseBuffer(store, dimension))

    def identity(self, dimension: int) -> SquareMatrix[NDArray]:
        """Identity matrix."""
        if dimension <= 0:
            raise DimensionError(f"Dimension must be above zero, got {dimension}.")
        xp = self.namespace
        return SquareMatrix(DenseBuffer(column_major(xp.eye(dimension, dtype=xp.float64)), dimension))

    #-------------------------------------------------------------------------------------------------
    # decomposition

    def qrdecomposition(self, matrix: ReadOnlySquareMatrix[NDArray] | NDArray | Sequence[Sequence[float]]) -> SquareQRDecomposition[NDArray]:
        """
        QR decomposition of a square matrix by Householder reflections.
        """
        if not isinstance(matrix, ReadOnlySquareMatrix):
            matrix = self.square_matrix(matrix)
        return qr_decomposition(matrix)

    #-------------------------------------------------------------------------------------------------
    # options

    def factorization_options(self, rtol: Optional[float] = None) -> FactorizationOptions:
        """
        Options for the factorization. A column whose remaining norm is at or below rtol times its
        norm in the input is treated as zero. If rtol is None, 8*n*eps of the working dtype is used.
        """
        return FactorizationOptions(namespace=self.namespace, rtol=rtol)

    def solve_options(self, tolerance: float = 0.0) -> SolveOptions:
        """
        Options for solve and inverse. Diagonal entries of R with an absolute value at or below
        the tolerance make the matrix count as singular.
        """
        return SolveOptions(namespace=self.namespace, tolerance=tolerance)

    @overload
    def get_options(self, otype: Literal[OptionType.FACTORIZATION]) -> FactorizationOptions: ...
    @overload
    def get_options(self, otype: Literal[OptionType.SOLVE]) -> SolveOptions: ...
    # implementation
    def get_options(self, otype: OptionType) -> FactorizationOptions | SolveOptions:
        """
        Get the options for the current thread.
        """
        return get_options(self.namespace, otype) # type: ignore

    def set_options(self, opts: FactorizationOptions | SolveOptions) -> None:
        """
        Set the options for the current thread.
        """
        set_options(opts)

    #-------------------------------------------------------------------------------------------------
    # io

    def write(self, group: h5py.Group, obj: ReadOnlySquareMatrix[NDArray]) -> None:
        """
        Write a square matrix to a hdf5 group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[SquareMatrix]) -> SquareMatrix[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[ReadOnlySquareMatrix]) -> ReadOnlySquareMatrix[NDArray]: ...
    # implementation
    def read(self, group: h5py.Group, cls: Any) -> Any:
        """
        Read a square matrix from a hdf5 group.
        """
        return _read(group, cls, self.namespace)
