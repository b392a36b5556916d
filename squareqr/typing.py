# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of squareqr."""

from .densebuffer import DenseBuffer
from .squarematrix import ReadOnlySquareMatrix, SquareMatrix
from .squareqrdecomposition import SquareQRDecomposition

from .errors import DimensionError, SingularMatrixError
from .options import Options, FactorizationOptions, SolveOptions, OptionType

from .squareqr import SquareQR
