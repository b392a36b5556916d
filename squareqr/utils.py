# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, length
from .errors import DimensionError

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must not be negative, got {value}")

def check_vector(vec: ArrayLike, dimension: int, offset: int = 0) -> None:
    if vec.ndim != 1:
        raise DimensionError(f"Expected a one dimensional vector, got {vec.ndim} dimensions.")
    if length(vec) < offset + dimension:
        raise DimensionError(f"Vector of length {length(vec)} is too short for dimension {dimension} "\
                             f"at offset {offset}.")
