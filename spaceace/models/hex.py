"""Hex grid coordinate data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HexCoordinate:
    """Axial hex coordinate (q, r).

    The third cube coordinate ``s`` is always derived as ``-q - r`` and is
    never stored, so ``q + r + s == 0`` holds by construction. Frozen so that
    coordinates can be used as dictionary keys and set members.
    """

    q: int
    r: int

    @property
    def s(self) -> int:
        """Implicit third cube coordinate."""
        return -self.q - self.r

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


@dataclass(frozen=True)
class FractionalHex:
    """Axial coordinate with float components, before rounding."""

    q: float
    r: float

    @property
    def s(self) -> float:
        return -self.q - self.r


@dataclass(frozen=True)
class Point:
    """Pixel-space position derived from a hex coordinate."""

    x: float
    y: float
