"""This submodule contains the editing model: EditableElement, a path element
with a stable identity whose points can be dragged, and PolyBezier, an owned
mutable sequence of them that notifies subscribers whenever it changes.

The geometry functions never see these classes; PolyBezier.to_elements()
converts to the plain element list they work on."""

# External dependencies
from collections.abc import MutableSequence
import random
from uuid import uuid4

# Internal dependencies
from .point import Point, Size
from .elements import MoveTo, Close, element_from_points, start_point
from .parser import parse_path, serialize_path, element_string
from .subdivision import subdivide_path
from .lookup import LookupTable, LOOKUP_TABLE_CAPACITY, LOOKUP_TABLE_THRESHOLD

# Default Parameters ##########################################################

# points of elements added without explicit coordinates are drawn from here
RANDOM_RANGE = (100, 300)


class EditableElement(object):
    """A path element as the editor sees it.

    `positions` and `offsets` are parallel lists ordered [end, control1,
    control2]; the offset of a point is a drag that has not been committed
    yet.  The element's type is derived from the number of points (0 is a
    close, 1 a line, 2 a quad, 3 a cubic) except that `is_move_to` marks a
    one-point element as a move."""

    def __init__(self, positions, offsets=None, is_move_to=False):
        self.id = uuid4()
        self.positions = list(positions)
        if len(self.positions) > 3:
            raise ValueError("An element has at most 3 points, got %s."
                             % len(self.positions))
        if offsets is None:
            offsets = [Size.zero() for _ in self.positions]
        self.offsets = list(offsets)
        self.is_move_to = is_move_to

    @classmethod
    def move_to(cls, point):
        return cls([point], is_move_to=True)

    @classmethod
    def line(cls, end=None):
        return cls([end or Point.zero()])

    @classmethod
    def quad(cls, end=None, control=None):
        return cls([end or Point.zero(), control or Point.zero()])

    @classmethod
    def cubic(cls, end=None, control1=None, control2=None):
        return cls([end or Point.zero(), control1 or Point.zero(),
                    control2 or Point.zero()])

    @classmethod
    def close(cls):
        return cls([])

    @classmethod
    def from_element(cls, element):
        return cls(element.points(), is_move_to=isinstance(element, MoveTo))

    @property
    def type(self):
        if self.is_move_to:
            return MoveTo.kind
        # points beyond the second control point do not change the type
        return element_from_points(self.positions[:3]).kind

    @property
    def current_positions(self):
        """The sum of the position and offset of each point."""
        return [p + o for p, o in zip(self.positions, self.offsets)]

    def commit_offsets(self):
        self.positions = self.current_positions
        self.offsets = [Size.zero() for _ in self.positions]

    def to_element(self):
        return element_from_points(self.current_positions[:3],
                                   self.is_move_to)

    @property
    def description(self):
        return element_string(self.to_element())

    def __repr__(self):
        return 'EditableElement(type=%r, positions=%r, offsets=%r)' % (
            self.type, self.positions, self.offsets)


def to_elements(editables):
    return [e.to_element() for e in editables]


def from_elements(elements):
    return [EditableElement.from_element(e) for e in elements]


def _editable(element):
    if isinstance(element, EditableElement):
        return element
    return EditableElement.from_element(element)


class PolyBezier(MutableSequence):
    """A mutable poly-Bezier curve: a sequence of EditableElements.

    Every mutation calls the subscribed callbacks once, with the PolyBezier
    as the only argument.  Plain path elements given to the constructor or to
    the sequence methods are wrapped in new EditableElements."""

    def __init__(self, elements=()):
        self._elements = [_editable(e) for e in elements]
        self._subscribers = []

    @classmethod
    def from_string(cls, pathdef):
        return cls(parse_path(pathdef))

    # Change notification #####################################################

    def subscribe(self, callback):
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        self._subscribers.remove(callback)

    def _changed(self):
        for callback in list(self._subscribers):
            callback(self)

    # MutableSequence #########################################################

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = [_editable(e) for e in value]
        else:
            value = _editable(value)
        self._elements[index] = value
        self._changed()

    def __delitem__(self, index):
        del self._elements[index]
        self._changed()

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return self._elements.__iter__()

    def insert(self, index, value):
        self._elements.insert(index, _editable(value))
        self._changed()

    def extend(self, values):
        self._elements.extend([_editable(e) for e in values])
        self._changed()

    def reverse(self):
        self._elements.reverse()
        self._changed()

    def __repr__(self):
        return "PolyBezier({})".format(
            ",\n           ".join(repr(x) for x in self._elements))

    # Conversion ##############################################################

    def to_elements(self):
        return to_elements(self._elements)

    @property
    def string(self):
        """The path string of the current curve."""
        return serialize_path(self.to_elements())

    def lookup_table(self, capacity=LOOKUP_TABLE_CAPACITY,
                     threshold=LOOKUP_TABLE_THRESHOLD):
        return LookupTable.from_elements(self.to_elements(), capacity=capacity,
                                         threshold=threshold)

    def index_of(self, element_id):
        for idx, element in enumerate(self._elements):
            if element.id == element_id:
                return idx
        raise KeyError(element_id)

    # Path manipulation #######################################################

    def update(self, pathdef):
        """Replaces the whole curve with the path parsed from pathdef."""
        self._elements = from_elements(parse_path(pathdef))
        self._changed()

    def _clean_up(self):
        if not self._elements:
            return
        kept = [self._elements[0]]
        for current in self._elements[1:]:
            if not (kept[-1].type == Close.kind and current.type == Close.kind):
                kept.append(current)
        self._elements = kept

    def clean_up(self):
        """Removes superfluous elements (repeated closes)."""
        self._clean_up()
        self._changed()

    def _clear(self):
        if not self._elements:
            return
        first = self._elements[0]
        if not first.is_move_to:
            starts = [e.current_positions[0] for e in self._elements
                      if e.type != Close.kind]
            new_start = starts[0] if starts else Point.zero()
            first = EditableElement.move_to(new_start)
        self._elements = [first]

    def clear(self):
        """Removes everything but the starting point of the curve."""
        self._clear()
        self._clean_up()
        self._changed()

    def delete(self, ids):
        """Deletes the elements whose id is in `ids`, keeping the curve
        well-formed: it always starts with a move.  Ids that match no element
        are ignored; if none match, nothing changes and no one is notified."""
        ids = set(ids)
        if not any(e.id in ids for e in self._elements):
            return
        if len(self._elements) == 2:
            survivors = [e for e in self._elements if e.id not in ids]
            if (any(e.type == Close.kind for e in self._elements) or
                    not survivors):
                self._clear()
            else:
                new_start = survivors[0].current_positions[0]
                self._elements = [EditableElement.move_to(new_start)]
        elif len(self._elements) > 2:
            remainder = [e for e in self._elements if e.id not in ids]
            if not remainder:
                self._clear()
            else:
                if not remainder[0].is_move_to:
                    if remainder[0].type == Close.kind:
                        new_start = start_point(self.to_elements())
                        remainder[0] = EditableElement.move_to(
                            new_start or Point.zero())
                    else:
                        remainder[0] = EditableElement.move_to(
                            remainder[0].current_positions[0])
                self._elements = remainder
        self._clean_up()
        self._changed()

    def add(self, kind, points=None, rng=None):
        """Appends a 'line', 'quad' or 'cubic' element.  Missing points are
        drawn at random from RANDOM_RANGE.  Moves and closes are added with
        new_subpath() and close_subpath() instead and are ignored here."""
        count = {'line': 1, 'quad': 2, 'cubic': 3}.get(kind)
        if count is None:
            return
        rng = rng or random
        if points is None:
            low, high = RANDOM_RANGE
            points = [Point(rng.uniform(low, high), rng.uniform(low, high))
                      for _ in range(count)]
        if len(points) != count:
            raise ValueError("A %s element takes %s points, got %s."
                             % (kind, count, len(points)))
        self._elements.append(EditableElement(points))
        self._changed()

    def new_subpath(self, point=None, rng=None):
        """Starts a new subpath, i.e. appends a move."""
        if point is None:
            rng = rng or random
            low, high = RANDOM_RANGE
            point = Point(rng.uniform(low, high), rng.uniform(low, high))
        self._elements.append(EditableElement.move_to(point))
        self._changed()

    def close_subpath(self, ids=()):
        """With no ids, closes the curve at its end.  Otherwise inserts a
        close after each selected element that is not a move."""
        ids = set(ids)
        if not ids:
            if self._elements and self._elements[-1].type != Close.kind:
                self._elements.append(EditableElement.close())
        else:
            selected = [idx for idx, e in enumerate(self._elements)
                        if e.id in ids and e.type != MoveTo.kind]
            for idx in reversed(selected):
                self._elements.insert(idx + 1, EditableElement.close())
        self._clean_up()
        self._changed()

    def subdivide(self, n=2):
        """Splits every element into n elements of the same type."""
        self._elements = from_elements(subdivide_path(self.to_elements(), n))
        self._clean_up()
        self._changed()

    def drag(self, element_id, point_index, offset):
        """Sets the pending offset of one point of an element."""
        element = self._elements[self.index_of(element_id)]
        element.offsets[point_index] = offset
        self._changed()

    def commit(self):
        """Folds every pending offset into its position."""
        for element in self._elements:
            element.commit_offsets()
        self._changed()
