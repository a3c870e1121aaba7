"""This submodule contains the two arc length estimators.

The quick length approximates a curve by the polyline through 21 evenly
spaced samples; it never fails and is what the lookup table uses to share out
its samples.  The accurate length numerically integrates the speed
|B'(t)| with adaptive quadrature and raises IntegrationError if the
quadrature does not converge within its interval budget."""

# External dependencies
import logging
from scipy.integrate import quad

# Internal dependencies
from .elements import MoveTo, iter_segments
from .bezier import bezier_point, quad_derivative, cubic_derivative

logger = logging.getLogger(__name__)

# Default Parameters ##########################################################

# quick_length() samples each element at QUICK_LENGTH_DIVISIONS + 1 points
QUICK_LENGTH_DIVISIONS = 20

# accurate length parameters, passed on to scipy.integrate.quad
LENGTH_ABS_TOL = 1e-8
LENGTH_REL_TOL = 1e-2
LENGTH_MAX_INTERVALS = 10


class IntegrationError(ArithmeticError):
    """The adaptive quadrature did not converge.  The length is unknown, it
    is not zero; fall back to quick_length() if an estimate will do."""


# Quick Length ################################################################

def quick_length(curve, divisions=QUICK_LENGTH_DIVISIONS):
    """returns the length of the polyline through curve(0), curve(1/n), ...,
    curve(1) where n = `divisions` and `curve` maps t to a Point."""
    total = 0
    last = curve(0)
    for i in range(1, divisions + 1):
        new = curve(i/divisions)
        total += last.distance_to(new)
        last = new
    return total


def element_quick_length(start, element, subpath_start=None,
                         divisions=QUICK_LENGTH_DIVISIONS):
    """returns the quick length of `element` drawn from `start`.  Lines and
    closing lines are measured exactly and a MoveTo has length 0."""
    if isinstance(element, MoveTo):
        return 0
    bpoints = element.bpoints(start, subpath_start)
    if len(bpoints) == 2:
        return bpoints[0].distance_to(bpoints[1])
    return quick_length(lambda t: bezier_point(bpoints, t), divisions)


def quick_lengths(elements, divisions=QUICK_LENGTH_DIVISIONS):
    """returns a list with the quick length of each element of the path,
    aligned with `elements`."""
    return [element_quick_length(start, element, subpath_start, divisions)
            for element, start, subpath_start in iter_segments(elements)]


# Accurate Length #############################################################

def _integrate_speed(derivative, t0, t1, abs_tol, rel_tol, max_intervals):
    result = quad(lambda tau: abs(derivative(tau)), t0, t1,
                  epsabs=abs_tol, epsrel=rel_tol, limit=max_intervals,
                  full_output=1)
    # with full_output, quad appends a message only when it did not converge
    if len(result) > 3:
        logger.warning("quadrature failed on [%s, %s]: %s", t0, t1, result[3])
        raise IntegrationError(result[3])
    s, abserr = result[0], result[1]
    logger.debug("quadrature success: %s (estimated error %s)", s, abserr)
    return s


def quad_length(start, control, end, t0=0, t1=1, abs_tol=LENGTH_ABS_TOL,
                rel_tol=LENGTH_REL_TOL, max_intervals=LENGTH_MAX_INTERVALS):
    """returns the arc length of the quadratic Bezier curve (start, control,
    end) between t0 and t1, integrated numerically.

    Raises IntegrationError if the quadrature does not converge."""
    return _integrate_speed(
        lambda t: quad_derivative(t, start, control, end),
        t0, t1, abs_tol, rel_tol, max_intervals)


def cubic_length(start, control1, control2, end, t0=0, t1=1,
                 abs_tol=LENGTH_ABS_TOL, rel_tol=LENGTH_REL_TOL,
                 max_intervals=LENGTH_MAX_INTERVALS):
    """returns the arc length of the cubic Bezier curve (start, control1,
    control2, end) between t0 and t1, integrated numerically.

    Raises IntegrationError if the quadrature does not converge."""
    return _integrate_speed(
        lambda t: cubic_derivative(t, start, control1, control2, end),
        t0, t1, abs_tol, rel_tol, max_intervals)


def element_length(start, element, t0=0, t1=1, subpath_start=None, **kwargs):
    """returns the arc length of `element` drawn from `start` between t0 and
    t1.  Lines and closing lines are measured in closed form, curves by
    quadrature (keyword arguments are passed on to quad_length() or
    cubic_length())."""
    if isinstance(element, MoveTo):
        return 0
    bpoints = element.bpoints(start, subpath_start)
    if len(bpoints) == 2:
        return bpoints[0].distance_to(bpoints[1])*(t1 - t0)
    elif len(bpoints) == 3:
        return quad_length(*bpoints, t0=t0, t1=t1, **kwargs)
    return cubic_length(*bpoints, t0=t0, t1=t1, **kwargs)


def path_length(elements, **kwargs):
    """returns the total accurate length of the path.

    Raises IntegrationError if any curve fails to integrate."""
    return sum(element_length(start, element, subpath_start=subpath_start,
                              **kwargs)
               for element, start, subpath_start in iter_segments(elements))
