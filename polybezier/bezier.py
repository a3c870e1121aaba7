"""This submodule contains the closed-form tools for single Bezier curves of
degree 1 to 3: evaluating points and first derivatives, and segmentation,
i.e. extracting the sub-curve over a parameter range [t0, t1] as a new curve
of the same degree.

Points are polybezier Point objects.  Bezier control points (bpoints) are
ordered from the start of the curve to its end, e.g. (start, control1,
control2, end) for a cubic."""

# External dependencies
import numpy as np

# Internal dependencies
from .point import Point, lerp
from .elements import MoveTo, Line, Quad, Cubic, Close


# Interpolation ###############################################################

def line_point(t, p0, p1):
    """returns the point of the line p0p1 at t."""
    return lerp(p0, p1, t)


def quad_point(t, p0, p1, p2):
    """returns the quadratic Bezier curve evaluated at t.

    Algebraically equivalent to
        (1-t)**2*p0 + 2*t*(1-t)*p1 + t**2*p2
    but evaluated by repeated linear interpolation, which returns the
    endpoints exactly at t=0 and t=1."""
    return lerp(lerp(p0, p1, t), lerp(p1, p2, t), t)


def cubic_point(t, p0, p1, p2, p3):
    """returns the cubic Bezier curve evaluated at t.

    Algebraically equivalent to
        (1-t)**3*p0 + 3*t*(1-t)**2*p1 + 3*t**2*(1-t)*p2 + t**3*p3"""
    a = lerp(p0, p1, t)
    b = lerp(p1, p2, t)
    c = lerp(p2, p3, t)
    return lerp(lerp(a, b, t), lerp(b, c, t), t)


def bezier_point(bpoints, t):
    """returns the Bezier curve with control points `bpoints` (2, 3 or 4 of
    them) evaluated at t.  No bounds checking is done on t."""
    order = len(bpoints) - 1
    if order == 3:
        return cubic_point(t, *bpoints)
    elif order == 2:
        return quad_point(t, *bpoints)
    elif order == 1:
        return line_point(t, *bpoints)
    elif order == 0:
        return bpoints[0]
    raise ValueError("Only curves of degree 3 or less are supported, got %s "
                     "control points." % len(bpoints))


# Derivatives #################################################################

def line_derivative(t, p0, p1):
    return p1 - p0


def quad_derivative(t, p0, p1, p2):
    """returns the first derivative of the quadratic Bezier curve at t.
    Note: this is a vector, not a position."""
    return -2*(1 - t)*p0 + 2*(1 - 2*t)*p1 + 2*t*p2


def cubic_derivative(t, p0, p1, p2, p3):
    """returns the first derivative of the cubic Bezier curve at t.
    Note: this is a vector, not a position."""
    tc = 1 - t
    return (-3*tc*tc*p0 + 3*tc*(1 - 3*t)*p1 + 3*t*(2 - 3*t)*p2 +
            3*t*t*p3)


def bezier_derivative(bpoints, t):
    order = len(bpoints) - 1
    if order == 3:
        return cubic_derivative(t, *bpoints)
    elif order == 2:
        return quad_derivative(t, *bpoints)
    elif order == 1:
        return line_derivative(t, *bpoints)
    raise ValueError("Only curves of degree 1 to 3 have a derivative here, "
                     "got %s control points." % len(bpoints))


# Segmentation ################################################################

# Bezier to power basis change of basis, i.e. B(t) = [1, t, t**2, ...] C P
COEFFICIENT_MATRICES = {
    2: np.array([[1, 0, 0],
                 [-2, 2, 0],
                 [1, -2, 1]], dtype=float),
    3: np.array([[1, 0, 0, 0],
                 [-3, 3, 0, 0],
                 [3, -6, 3, 0],
                 [-1, 3, -3, 1]], dtype=float),
}

INVERSE_COEFFICIENT_MATRICES = {
    2: np.array([[1, 0, 0],
                 [1, 1/2, 0],
                 [1, 1, 1]], dtype=float),
    3: np.array([[1, 0, 0, 0],
                 [1, 1/3, 0, 0],
                 [1, 2/3, 1/3, 0],
                 [1, 1, 1, 1]], dtype=float),
}


def restriction_matrix(degree, t0, t1):
    """returns the matrix R, expressed in the power basis, such that
    [1, s, s**2, ...] = [1, u, u**2, ...] R  for  s = t0 + (t1 - t0)*u."""
    s = t0
    d = t1 - t0
    if degree == 2:
        return np.array([[1, s, s*s],
                         [0, d, 2*s*d],
                         [0, 0, d*d]], dtype=float)
    elif degree == 3:
        return np.array([[1, s, s*s, s*s*s],
                         [0, d, 2*s*d, 3*s*s*d],
                         [0, 0, d*d, 3*s*d*d],
                         [0, 0, 0, d*d*d]], dtype=float)
    raise ValueError("Restriction matrices exist for degree 2 and 3 only.")


def segment_bpoints(bpoints, t0, t1):
    """returns the control points of the part of the Bezier curve with
    control points `bpoints` between t0 and t1, as a curve of the same
    degree.

    Requires 0 <= t0 < t1 <= 1; this is not checked."""
    degree = len(bpoints) - 1
    if degree == 1:
        p0, p1 = bpoints
        return lerp(p0, p1, t0), lerp(p0, p1, t1)
    coeffs = COEFFICIENT_MATRICES[degree]
    transform = INVERSE_COEFFICIENT_MATRICES[degree].dot(
        restriction_matrix(degree, t0, t1)).dot(coeffs)
    new_points = transform.dot(np.array([p.to_tuple() for p in bpoints]))
    return tuple(Point(x, y) for x, y in new_points)


def segment_line(start, end, t0, t1):
    """returns the Line covering the part of the line from start to end
    between t0 and t1.  Its implied start is line_point(t0, start, end)."""
    return Line(lerp(start, end, t1))


def segment_quad(start, end, control, t0, t1):
    """returns the Quad covering the quadratic Bezier curve (start, control,
    end) between t0 and t1.

    Requires 0 <= t0 < t1 <= 1; this is not checked."""
    _, new_control, new_end = segment_bpoints((start, control, end), t0, t1)
    return Quad(new_end, new_control)


def segment_cubic(start, end, control1, control2, t0, t1):
    """returns the Cubic covering the cubic Bezier curve (start, control1,
    control2, end) between t0 and t1.

    Requires 0 <= t0 < t1 <= 1; this is not checked."""
    _, c1, c2, new_end = segment_bpoints((start, control1, control2, end),
                                         t0, t1)
    return Cubic(new_end, c1, c2)


def segment(start, element, t0, t1, subpath_start=None):
    """returns the element covering `element` (drawn from `start`) between
    t0 and t1.  A MoveTo is returned unchanged and a Close becomes the Line
    segment of the closing line back to `subpath_start`."""
    if isinstance(element, Line):
        return segment_line(start, element.end, t0, t1)
    elif isinstance(element, Quad):
        return segment_quad(start, element.end, element.control, t0, t1)
    elif isinstance(element, Cubic):
        return segment_cubic(start, element.end, element.control1,
                             element.control2, t0, t1)
    elif isinstance(element, MoveTo):
        return element
    elif isinstance(element, Close):
        return segment_line(start, subpath_start, t0, t1)
    raise TypeError("Expected a MoveTo, Line, Quad, Cubic or Close element, "
                    "got %r." % (element,))


def element_point(start, element, t, subpath_start=None):
    """returns the point at t of the curve `element` draws from `start`."""
    return bezier_point(element.bpoints(start, subpath_start), t)
