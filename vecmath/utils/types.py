from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

# Storage dtype of every vector component.
DTYPE = np.float32
Scalar = np.float32

FloatArray = NDArray[np.floating]

Vec2Array = NDArray[np.float32]  # intended shape (2,)
Vec3Array = NDArray[np.float32]  # intended shape (3,)

__all__ = [
    "ArrayLike",
    "DTYPE", "Scalar",
    "FloatArray", "Vec2Array", "Vec3Array",
]
