# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Type
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .densebuffer import DenseBuffer, column_major
from .squarematrix import ReadOnlySquareMatrix, SquareMatrix
from .errors import DimensionError

def write(group: h5py.Group, obj: ReadOnlySquareMatrix) -> None:
    if isinstance(obj, ReadOnlySquareMatrix):
        group.attrs["dimension"] = obj.dimension
        group.create_dataset("data", data=np.asarray(to_device(obj.to_array(), "cpu")))
    else:
        raise ValueError("Invalid object.")

def read[T: ArrayLike](group: h5py.Group, cls: Type[ReadOnlySquareMatrix], xp: ArrayNamespace[T]) -> ReadOnlySquareMatrix[T]:
    if cls in (SquareMatrix, ReadOnlySquareMatrix):
        dimension = int(get_attr(group, "dimension"))
        dataset = group["data"]
        assert isinstance(dataset, h5py.Dataset)
        data = xp.asarray(np.asarray(dataset))
        if data.shape != (dimension, dimension):
            raise DimensionError(f"Stored data of shape {data.shape} does not match dimension {dimension}.")
        return cls(DenseBuffer(column_major(data), dimension))

    raise ValueError("Invalid class.")

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]
