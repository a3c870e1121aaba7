"""This submodule contains the path element model: the five element classes
a path is built from (MoveTo, Line, Quad, Cubic and Close) and the helpers
for walking a path, i.e. a plain list of such elements.

An element stores only the points it adds to the path, ordered
[end, control1, control2].  The start of the curve an element draws is the
end of whatever came before it, so most functions here take that start
point explicitly."""

# External dependencies
from warnings import warn

# Internal dependencies
from .point import Point


class _Element(object):
    kind = None
    _fields = ()

    def points(self):
        """returns the element's points, ordered [end, control1, control2]."""
        return [getattr(self, f) for f in self._fields]

    def __hash__(self):
        return hash((self.kind,) + tuple(self.points()))

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(
            '%s=%r' % (f, getattr(self, f)) for f in self._fields))

    def __eq__(self, other):
        if not isinstance(other, _Element):
            return NotImplemented
        return type(self) is type(other) and self.points() == other.points()

    def __ne__(self, other):
        if not isinstance(other, _Element):
            return NotImplemented
        return not self == other

    def __len__(self):
        return len(self._fields)

    def __getitem__(self, item):
        return self.points()[item]

    def transformed(self, func):
        """returns a copy of the element with func applied to each point."""
        return type(self)(*[func(p) for p in self.points()])


class MoveTo(_Element):
    """Starts a new subpath at `end`."""
    kind = 'move'
    _fields = ('end',)

    def __init__(self, end):
        self.end = end

    def bpoints(self, start=None, subpath_start=None):
        return self.end,


class Line(_Element):
    kind = 'line'
    _fields = ('end',)

    def __init__(self, end):
        self.end = end

    def bpoints(self, start, subpath_start=None):
        """returns the Bezier control points of the line drawn from start."""
        return start, self.end


class Quad(_Element):
    kind = 'quad'
    _fields = ('end', 'control')

    def __init__(self, end, control):
        self.end = end
        self.control = control

    def bpoints(self, start, subpath_start=None):
        """returns the Bezier control points of the curve drawn from start."""
        return start, self.control, self.end


class Cubic(_Element):
    kind = 'cubic'
    _fields = ('end', 'control1', 'control2')

    def __init__(self, end, control1, control2):
        self.end = end
        self.control1 = control1
        self.control2 = control2

    def bpoints(self, start, subpath_start=None):
        """returns the Bezier control points of the curve drawn from start."""
        return start, self.control1, self.control2, self.end


class Close(_Element):
    """Closes the current subpath with a straight line back to the point of
    the most recent MoveTo.  Carries no points of its own."""
    kind = 'close'

    def bpoints(self, start, subpath_start=None):
        if subpath_start is None:
            raise ValueError("Close needs the start of its subpath.")
        return start, subpath_start


ELEMENT_TYPES = (MoveTo, Line, Quad, Cubic, Close)


def is_element(element):
    return isinstance(element, ELEMENT_TYPES)


def is_curve(element):
    """Checks that element is a Line, Quad or Cubic, i.e. it draws a curve
    ending at a point of its own."""
    return isinstance(element, (Line, Quad, Cubic))


def element_from_points(points, is_move_to=False):
    """Converts a list of points ordered [end, control1, control2] to the
    matching element.  One point is a Line unless `is_move_to` is set."""
    if is_move_to:
        return MoveTo(*points)
    count = len(points)
    if count == 0:
        return Close()
    elif count == 1:
        return Line(*points)
    elif count == 2:
        return Quad(*points)
    elif count == 3:
        return Cubic(*points)
    raise ValueError("An element has at most 3 points, got %s." % count)


def iter_segments(elements):
    """Walks a path, yielding (element, start, subpath_start) triples.

    `start` is the current point before the element is drawn and
    `subpath_start` is the point of the MoveTo in effect (for a MoveTo it is
    the element's own point).  Both default to the origin until the path's
    first MoveTo."""
    current = Point.zero()
    subpath_start = Point.zero()
    moved = False
    for element in elements:
        if isinstance(element, MoveTo):
            subpath_start = element.end
            moved = True
            yield element, current, subpath_start
            current = element.end
        elif isinstance(element, Close):
            if not moved:
                warn("Close element with no preceding MoveTo; closing to "
                     "the origin.")
            yield element, current, subpath_start
            current = subpath_start
        elif is_curve(element):
            yield element, current, subpath_start
            current = element.end
        else:
            raise TypeError("Expected a MoveTo, Line, Quad, Cubic or Close "
                            "element, got %r." % (element,))


def start_point(elements):
    """returns the point of the path's first MoveTo, or None."""
    for element in elements:
        if isinstance(element, MoveTo):
            return element.end
    return None


def end_point(elements):
    """returns the end of the last Line, Quad or Cubic in the path, or
    None."""
    for element in reversed(elements):
        if is_curve(element):
            return element.end
    return None


def all_points(elements):
    """returns every point stored in the path, in order."""
    return [p for element in elements for p in element.points()]