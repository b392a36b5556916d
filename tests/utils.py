from typing import Any, Sequence
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

_rng = np.random.default_rng(1234)

def rand_data(xp, *shape: int):
    data = _rng.random(shape)
    if api.is_torch_namespace(xp) or api.is_cupy_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def rand_matrix(xp, size: int):
    """Random matrix with entries in [-1, 1) and a dominant diagonal."""
    data = 2.0*_rng.random((size, size)) - 1.0 + size*np.eye(size)
    return xp.asarray(data)

def max_error(xp, a: Any, b: Any) -> float:
    return float(xp.max(xp.abs(xp.asarray(a) - xp.asarray(b))))

def cofactor_determinant(mat: Sequence[Sequence[float]]) -> float:
    n = len(mat)
    if n == 1:
        return mat[0][0]
    det = 0.0
    for j in range(n):
        minor = [row[:j] + row[j+1:] for row in mat[1:]]
        det += (-1)**j * mat[0][j] * cofactor_determinant(minor)
    return det
