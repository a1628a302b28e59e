"""
Plain interchange records for handing vectors to other libraries.

They carry no behaviour. ``Vector2.from_interchange`` / ``Vector3.from_interchange``
accept these or any other object exposing ``.x``, ``.y`` (and ``.z``).
"""
from __future__ import annotations

from typing import NamedTuple

__all__ = ("Vector2Record", "Vector3Record")


class Vector2Record(NamedTuple):
    x: float
    y: float


class Vector3Record(NamedTuple):
    x: float
    y: float
    z: float
