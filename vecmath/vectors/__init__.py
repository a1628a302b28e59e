from ._base import VectorBase
from .vector2 import Vector2
from .vector3 import Vector3
