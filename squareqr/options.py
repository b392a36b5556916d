# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Self, overload
from types import NoneType
from enum import Enum
import threading

from .backend import ArrayNamespace
from .utils import check_non_neg

class OptionType(Enum):
    FACTORIZATION = 0
    SOLVE = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class FactorizationOptions(Options):
    """
    Context manager for the options of the Householder factorization.
    """

    #: Relative threshold below which a column is treated as numerically zero. The absolute
    #: threshold of a column is rtol times the norm of that column in the input. None selects 8*n*eps.
    rtol: float | NoneType

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            rtol: float | NoneType = None):
        if not isinstance(rtol, NoneType):
            check_non_neg("rtol", rtol)
        self.rtol = rtol
        super().__init__(namespace, OptionType.FACTORIZATION)

class SolveOptions(Options):
    """
    Context manager for the options of the triangular solves.
    """

    #: Diagonal entries with an absolute value at or below the tolerance are treated as zero.
    tolerance: float

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            tolerance: float = 0.0):
        check_non_neg("tolerance", tolerance)
        self.tolerance = tolerance
        super().__init__(namespace, OptionType.SOLVE)

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.FACTORIZATION]) -> FactorizationOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.SOLVE]) -> SolveOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    """Options set for the current thread, or the defaults if there are none."""
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    elif otype == OptionType.FACTORIZATION:
        return FactorizationOptions(namespace=namespace)
    else:
        return SolveOptions(namespace=namespace)

def set_options(opts: FactorizationOptions | SolveOptions) -> None:
    global _opts
    _opts[opts.key] = opts
