"""Small geometric types and random number helpers."""

import random
import time
from dataclasses import dataclass, field

_rng = random.Random(time.time())


@dataclass
class Vec2:
    """A single point in 2d space."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self):
        return f"{{ {self.x:f}, {self.y:f} }}"


@dataclass
class Vec3:
    """A single point in 3d space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self):
        return f"{{ {self.x:f}, {self.y:f}, {self.z:f} }}"


@dataclass
class Transform:
    """A transformation in 3d space."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=Vec3)

    def __str__(self):
        return f"XYZ {self.position} ROT {self.rotation} SCALE {self.scale}"


def rand_bytes(size):
    """Return ``size`` random bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytes(_rng.getrandbits(8) for _ in range(size))


def _check_range(low, high):
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")


def randf(low, high):
    """Return a random float in the inclusive range [low, high]."""
    _check_range(low, high)
    return _rng.uniform(low, high)


def randi(low, high):
    """Return a random integer in the inclusive range [low, high]."""
    _check_range(low, high)
    return _rng.randint(low, high)


def randu(low, high):
    """Return a random non-negative integer in the inclusive range [low, high]."""
    if low < 0 or high < 0:
        raise ValueError("unsigned range bounds must not be negative")
    _check_range(low, high)
    return _rng.randint(low, high)