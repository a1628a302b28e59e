import numpy as np

from vecmath.utils.types import DTYPE, ArrayLike, Vec2Array, Vec3Array

############################
# ARRAY COERCION UTILITIES
############################

FLOAT32_EPS = np.finfo(DTYPE).eps

def vec2(v: ArrayLike) -> Vec2Array:
    v = np.asarray(v, dtype=DTYPE)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2-vector with shape (2,), got {v.shape}")
    return v

def vec3(v: ArrayLike) -> Vec3Array:
    v = np.asarray(v, dtype=DTYPE)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-vector with shape (3,), got {v.shape}")
    return v
