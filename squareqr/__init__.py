# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging as _logging

from .squareqr import SquareQR
from .errors import DimensionError, SingularMatrixError

__all__ = ["SquareQR", "DimensionError", "SingularMatrixError"]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
