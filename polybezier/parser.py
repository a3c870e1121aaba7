"""This submodule contains parse_path() and serialize_path(), which convert
between a path (a list of elements) and its textual form, and to_svg_d(),
which writes the equivalent SVG path d-string.

The textual form has one single-letter command per element, end point first,
then control points:

    m x y                      MoveTo
    l x y                      Line
    q x y cx cy                Quad
    c x y c1x c1y c2x c2y      Cubic
    h                          Close

e.g. 'm 0.0 0.0 l 10.0 0.0 q 10.0 10.0 15.0 5.0 h'."""

# External dependencies
import re

# Internal dependencies
from .point import Point
from .elements import MoveTo, Line, Quad, Cubic, Close

COMMANDS = set('MmLlQqCcHh')

COMMAND_RE = re.compile(r"([MmLlQqCcHh])")
FLOAT_RE = re.compile(r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?")

# number of coordinates each command takes
_ARITY = {'m': 2, 'l': 2, 'q': 4, 'c': 6, 'h': 0}


def _tokenize_path(pathdef):
    for x in COMMAND_RE.split(pathdef):
        if x in COMMANDS:
            yield x
        for token in FLOAT_RE.findall(x):
            yield token


def _points(values):
    return [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def parse_path(pathdef):
    """Converts a path string to a list of elements.

    Commands are case-insensitive.  A command may be followed by several
    groups of coordinates, in which case it is repeated; repeated groups
    after an 'm' are lines.  Raises ValueError for malformed strings."""
    tokens = list(_tokenize_path(pathdef))
    # Reverse for easy use of .pop()
    tokens.reverse()

    elements = []
    command = None
    while tokens:
        if tokens[-1] in COMMANDS:
            command = tokens.pop().lower()
        elif command is None or command == 'h':
            raise ValueError("Unallowed implicit command in %r, position %s"
                             % (pathdef, len(pathdef.split()) - len(tokens)))

        arity = _ARITY[command]
        if len(tokens) < arity or (arity and any(tok in COMMANDS
                                                 for tok in tokens[-arity:])):
            raise ValueError("Command %r expects %s coordinates in %r."
                             % (command, arity, pathdef))
        values = [float(tokens.pop()) for _ in range(arity)]

        if command == 'm':
            elements.append(MoveTo(*_points(values)))
            # implicit coordinates following a moveto are lines
            command = 'l'
        elif command == 'l':
            elements.append(Line(*_points(values)))
        elif command == 'q':
            elements.append(Quad(*_points(values)))
        elif command == 'c':
            elements.append(Cubic(*_points(values)))
        elif command == 'h':
            elements.append(Close())
    return elements


def _format_point(pt):
    return "{} {}".format(pt.x, pt.y)


def element_string(element):
    """returns the command for a single element."""
    if isinstance(element, Close):
        return 'h'
    letter = {MoveTo: 'm', Line: 'l', Quad: 'q', Cubic: 'c'}[type(element)]
    return ' '.join([letter] + [_format_point(p) for p in element.points()])


def serialize_path(elements):
    """returns the path string of a list of elements; the exact inverse of
    parse_path()."""
    return ' '.join(element_string(element) for element in elements)


def to_svg_d(elements):
    """returns an (absolute) SVG path d-string for a list of elements."""
    parts = []
    for element in elements:
        if isinstance(element, MoveTo):
            parts.append('M {},{}'.format(element.end.x, element.end.y))
        elif isinstance(element, Line):
            parts.append('L {},{}'.format(element.end.x, element.end.y))
        elif isinstance(element, Quad):
            args = (element.control.x, element.control.y,
                    element.end.x, element.end.y)
            parts.append('Q {},{} {},{}'.format(*args))
        elif isinstance(element, Cubic):
            args = (element.control1.x, element.control1.y,
                    element.control2.x, element.control2.y,
                    element.end.x, element.end.y)
            parts.append('C {},{} {},{} {},{}'.format(*args))
        elif isinstance(element, Close):
            parts.append('Z')
    return ' '.join(parts)
