# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

class DimensionError(ValueError):
    """
    Raised when the length of a vector or storage does not match the dimension
    of the matrix or decomposition it is used with.
    """

class SingularMatrixError(ValueError):
    """
    Raised when a triangular solve meets a zero (or below tolerance) diagonal entry,
    i.e. the system has no unique solution.
    """
