# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the parts of the array API standard used by squareqr."""

from typing import Protocol, Any, Self, Sequence

Device = Any
DType = Any

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...
    @property
    def ndim(self) -> int: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __matmul__(self, other: Any, /) -> Self: ...
    def __neg__(self) -> Self: ...
    def __float__(self) -> float: ...

class ArrayNamespace[T: ArrayLike](Protocol):

    float64: DType
    int64: DType
    newaxis: None

    def asarray(self, obj: Any, /, *, dtype: DType | None = None, device: Device | None = None, copy: bool | None = None) -> T: ...
    def arange(self, start: int, /, stop: int | None = None, step: int = 1, *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def eye(self, n_rows: int, n_cols: int | None = None, /, *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def zeros(self, shape: int | Sequence[int], *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def astype(self, x: T, dtype: DType, /) -> T: ...
    def reshape(self, x: T, /, shape: Sequence[int]) -> T: ...
    def permute_dims(self, x: T, /, axes: Sequence[int]) -> T: ...
    def take(self, x: T, indices: T, /, *, axis: int | None = None) -> T: ...
    def matmul(self, x1: T, x2: T, /) -> T: ...
    def triu(self, x: T, /, *, k: int = 0) -> T: ...
    def sum(self, x: T, /, *, axis: int | None = None) -> T: ...
    def prod(self, x: T, /) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def max(self, x: T, /) -> T: ...
    def any(self, x: T, /) -> T: ...
    def all(self, x: T, /) -> T: ...
    def isdtype(self, dtype: DType, kind: str | tuple[str, ...]) -> bool: ...
    def finfo(self, dtype: DType, /) -> Any: ...
