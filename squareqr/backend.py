# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import device, to_device

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def working_dtype(xp: ArrayNamespace, dtype: DType) -> DType:
    """Floating dtype used for computations on arrays of the given dtype."""
    if xp.isdtype(dtype, "real floating"):
        return dtype
    if xp.isdtype(dtype, "integral"):
        return xp.float64
    raise TypeError(f"Unsupported dtype {dtype}, expected a real floating or integral dtype.")

def length(array: ArrayLike) -> int:
    shp = array.shape
    if len(shp) != 1 or shp[0] is None:
        raise ValueError("Expected a one dimensional array of known length.")
    return shp[0]

__all__ = ["get_namespace", "namespace_of_arrays", "working_dtype", "length",
           "device", "to_device", "ArrayNamespace", "ArrayLike", "Device", "DType"]
