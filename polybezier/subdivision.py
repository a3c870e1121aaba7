"""This submodule contains functions that split the elements of a path into
n elements of the same degree covering equal parameter intervals
[(i-1)/n, i/n].  Note that equal parameter intervals are generally not equal
in length for curves.

Splitting a path gives finer-grained points to drag when editing."""

# Internal dependencies
from .elements import MoveTo, Line, Quad, Cubic, Close, iter_segments
from .bezier import segment_line, segment_quad, segment_cubic


def _intervals(n):
    return [((i - 1)/n, i/n) for i in range(1, n + 1)]


def subdivide_line(start, end, n):
    """Divides the line from start to end into n equal Lines.  For n <= 0
    the line is returned as a single, unchanged element."""
    if n <= 0:
        return [Line(end)]
    return [segment_line(start, end, t0, t1) for t0, t1 in _intervals(n)]


def subdivide_quad(start, end, control, n):
    """Divides the quadratic Bezier curve (start, control, end) into n Quads.
    For n <= 0 the curve is returned as a single, unchanged element."""
    if n <= 0:
        return [Quad(end, control)]
    return [segment_quad(start, end, control, t0, t1)
            for t0, t1 in _intervals(n)]


def subdivide_cubic(start, end, control1, control2, n):
    """Divides the cubic Bezier curve (start, control1, control2, end) into n
    Cubics.  For n <= 0 the curve is returned as a single, unchanged
    element."""
    if n <= 0:
        return [Cubic(end, control1, control2)]
    return [segment_cubic(start, end, control1, control2, t0, t1)
            for t0, t1 in _intervals(n)]


def subdivide_closing_line(start, end, n):
    """Like subdivide_line(), but for the line a Close draws from start back
    to the subpath's first point `end`: makes n-1 Lines followed by a single
    Close, which draws the last piece."""
    if n <= 0:
        return [Close()]
    segments = [segment_line(start, end, t0, t1)
                for t0, t1 in _intervals(n)[:-1]]
    segments.append(Close())
    return segments


def subdivide_path(elements, n):
    """returns a new path in which every Line, Quad, Cubic and Close of
    `elements` has been divided into n pieces.  MoveTo elements are kept as
    they are."""
    new_elements = []
    for element, start, subpath_start in iter_segments(elements):
        if isinstance(element, Line):
            new_elements.extend(subdivide_line(start, element.end, n))
        elif isinstance(element, Quad):
            new_elements.extend(subdivide_quad(start, element.end,
                                               element.control, n))
        elif isinstance(element, Cubic):
            new_elements.extend(subdivide_cubic(start, element.end,
                                                element.control1,
                                                element.control2, n))
        elif isinstance(element, MoveTo):
            new_elements.append(element)
        elif isinstance(element, Close):
            new_elements.extend(subdivide_closing_line(start, subpath_start,
                                                       n))
    return new_elements
