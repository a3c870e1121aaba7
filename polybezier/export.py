"""This submodule contains the tools for exporting a path in normalized
coordinates: the curve's bounding box, normalization of points into
[0, 1] x [0, 1] (optionally scaled by a width and height), and an svgwrite
Drawing of the normalized path."""

# External dependencies
from os import path as os_path, makedirs
from svgwrite import Drawing

# Internal dependencies
from .point import Point
from .elements import MoveTo, iter_segments
from .bezier import bezier_point
from .parser import to_svg_d

# Default Parameters ##########################################################

# sample_path() parameters for finding the extent of the drawn curve
EXPORT_SAMPLE_DIVISIONS = 20
EXPORT_SAMPLE_THRESHOLD = 0.4

# decimal places of exported coordinates
EXPORT_PRECISION = 3


def sample_path(elements, divisions=EXPORT_SAMPLE_DIVISIONS,
                threshold=EXPORT_SAMPLE_THRESHOLD):
    """returns points sampled along the path: the point of each MoveTo and
    `divisions` evenly spaced samples of every other element, skipping
    samples within `threshold` of the previous one."""
    samples = []
    for element, start, subpath_start in iter_segments(elements):
        if isinstance(element, MoveTo):
            samples.append(element.end)
            continue
        bpoints = element.bpoints(start, subpath_start)
        for i in range(1, divisions + 1):
            candidate = bezier_point(bpoints, i/divisions)
            if not samples or candidate.distance_to(samples[-1]) > threshold:
                samples.append(candidate)
    return samples


def bounding_box(points):
    """returns (xmin, xmax, ymin, ymax) over points, or all zeros if there
    are none."""
    points = list(points)
    if not points:
        return 0, 0, 0, 0
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), max(xs), min(ys), max(ys)


def path_bounding_box(elements):
    """returns the bounding box of the curve drawn by the path (found by
    sampling it, so control points off the curve do not count)."""
    return bounding_box(sample_path(elements))


def normalize_point(pt, bbox, width=1, height=1):
    """Maps pt into the box [0, width] x [0, height] by subtracting the
    minimum of `bbox` and dividing by its range.  An axis with zero range
    maps to 0."""
    xmin, xmax, ymin, ymax = bbox
    dx = xmax - xmin
    dy = ymax - ymin
    x = (pt.x - xmin)/dx if dx else 0.0
    y = (pt.y - ymin)/dy if dy else 0.0
    return Point(x*width, y*height)


def normalized_elements(elements, width=1, height=1, bbox=None):
    """returns a copy of the path with every point normalized to
    [0, width] x [0, height].  By default the box is the path's
    path_bounding_box()."""
    if bbox is None:
        bbox = path_bounding_box(elements)
    return [element.transformed(
                lambda p: normalize_point(p, bbox, width, height))
            for element in elements]


def _rounded(elements, precision):
    return [element.transformed(
                lambda p: Point(round(p.x, precision), round(p.y, precision)))
            for element in elements]


def path2drawing(elements, width=1, height=1, filename=None,
                 precision=EXPORT_PRECISION, stroke='black',
                 stroke_width=None, svgwrite_debug=False):
    """Creates and returns an svgwrite Drawing of size width x height holding
    the normalized path.  If `filename` is given the drawing is also
    saved there."""
    normalized = _rounded(normalized_elements(elements, width, height),
                          precision)
    if stroke_width is None:
        stroke_width = max(width, height)*0.005

    dwg = Drawing(filename=filename or 'noname.svg',
                  size=(width, height), debug=svgwrite_debug,
                  viewBox='0 0 %s %s' % (width, height))
    dwg.add(dwg.path(to_svg_d(normalized), stroke=stroke,
                     stroke_width=str(stroke_width), fill='none'))

    if filename is not None:
        dirname = os_path.dirname(filename)
        if dirname and not os_path.exists(dirname):
            makedirs(dirname)
        dwg.save()
    return dwg
