"""
Guarded allocation of result and temporary matrices.

Every buffer an operation produces goes through allocate(), so a failed
allocation anywhere surfaces as OutOfMemoryError. Nothing allocated
before the failure is kept alive: the partially built buffers are local
to the failing call and are released as the exception unwinds.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import OutOfMemoryError


def allocate(rows: int, cols: int) -> NDArray[np.float64]:
    """
    Allocate an uninitialised (rows x cols) float64 buffer.

    Raises:
        OutOfMemoryError: If the allocation fails
    """
    try:
        return np.empty((rows, cols), dtype=np.float64)
    except MemoryError as e:
        raise OutOfMemoryError(
            f"cannot allocate {rows}x{cols} float64 matrix",
            shape=(rows, cols),
        ) from e
