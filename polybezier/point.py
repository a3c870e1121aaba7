"""This submodule contains the two small value types everything else in
polybezier is built on: Point, a position in the plane, and Size, a pending
(drag) offset that can be added to a Point."""

# External dependencies
from math import hypot
import numpy as np


class Point(object):
    """An immutable (x, y) pair supporting vector arithmetic."""
    __slots__ = ('_x', '_y')

    # keep numpy scalars from treating a Point as a length-2 sequence
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0):
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def from_complex(cls, z):
        return cls(z.real, z.imag)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __repr__(self):
        return 'Point(x=%r, y=%r)' % (self._x, self._y)

    def __hash__(self):
        return hash((self._x, self._y))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __ne__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return not self == other

    def __iter__(self):
        yield self._x
        yield self._y

    def __getitem__(self, item):
        return (self._x, self._y)[item]

    def __len__(self):
        return 2

    def __add__(self, other):
        if isinstance(other, (Point, Size)):
            dx, dy = other
            return Point(self._x + dx, self._y + dy)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Point, Size)):
            dx, dy = other
            return Point(self._x - dx, self._y - dy)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (Point, Size)):
            return NotImplemented
        return Point(self._x*scalar, self._y*scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Point(self._x/scalar, self._y/scalar)

    def __neg__(self):
        return Point(-self._x, -self._y)

    def __abs__(self):
        return hypot(self._x, self._y)

    def dot(self, other):
        return self._x*other.x + self._y*other.y

    def distance_to(self, other):
        return hypot(self._x - other.x, self._y - other.y)

    def distance_squared_to(self, other):
        dx = self._x - other.x
        dy = self._y - other.y
        return dx*dx + dy*dy

    def to_complex(self):
        return complex(self._x, self._y)

    def to_array(self):
        return np.array([self._x, self._y])

    def to_tuple(self):
        return self._x, self._y


class Size(object):
    """A (dx, dy) offset, e.g. the distance a point has been dragged but not
    yet committed.  Adding a Size to a Point gives the effective position."""
    __slots__ = ('dx', 'dy')

    def __init__(self, dx=0.0, dy=0.0):
        self.dx = float(dx)
        self.dy = float(dy)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    def __repr__(self):
        return 'Size(dx=%r, dy=%r)' % (self.dx, self.dy)

    def __hash__(self):
        return hash((self.dx, self.dy))

    def __eq__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self.dx == other.dx and self.dy == other.dy

    def __ne__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return not self == other

    def __iter__(self):
        yield self.dx
        yield self.dy

    def __add__(self, other):
        if isinstance(other, Size):
            return Size(self.dx + other.dx, self.dy + other.dy)
        if isinstance(other, Point):
            return other + self
        return NotImplemented

    __radd__ = __add__

    def to_point(self):
        return Point(self.dx, self.dy)


def lerp(a, b, t):
    """returns the point a fraction t of the way from a to b.

    The two halves of the parameter range are evaluated from opposite ends so
    that lerp(a, b, 0) == a, lerp(a, b, 1) == b and lerp(a, a, t) == a hold
    exactly in floating point."""
    dx = b.x - a.x
    dy = b.y - a.y
    if t < 0.5:
        return Point(a.x + dx*t, a.y + dy*t)
    tc = 1 - t
    return Point(b.x - dx*tc, b.y - dy*tc)
