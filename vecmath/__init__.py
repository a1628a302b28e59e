from .vectors import Vector2, Vector3, VectorBase
from .vectors import vector2, vector3
from .interop import Vector2Record, Vector3Record

__version__ = "0.1.0"
