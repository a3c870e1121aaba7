"""This submodule contains the lookup table: an ordered sample of points,
spaced roughly evenly by arc length along a whole path, used for approximate
closest-point and percent-along-path queries (e.g. hit-testing a drag).

A table describes one snapshot of a path.  It is never updated in place;
build a new one after the path changes."""

# External dependencies
from collections.abc import Sequence
import numpy as np

# Internal dependencies
from .elements import MoveTo, iter_segments
from .bezier import bezier_point
from .arclength import quick_lengths

# Default Parameters ##########################################################

# approximate number of samples in a table (an older variant used 300)
LOOKUP_TABLE_CAPACITY = 500

# a sample is only kept if it is further than this from the previous one
LOOKUP_TABLE_THRESHOLD = 1.0


def generate_lookup_table(elements, capacity=LOOKUP_TABLE_CAPACITY,
                          threshold=LOOKUP_TABLE_THRESHOLD):
    """returns a list of points sampled along the path.

    Each element gets a share of the `capacity` samples proportional to its
    quick length.  A sample is appended only if it lies more than `threshold`
    from the table's last point; the point of a MoveTo is always appended.
    A path of total length 0 gives an empty table."""
    lengths = quick_lengths(elements)
    total_length = sum(lengths)
    if not total_length > 0:
        return []

    table = []
    for (element, start, subpath_start), length in zip(
            iter_segments(elements), lengths):
        if isinstance(element, MoveTo):
            table.append(element.end)
            continue

        divisions = capacity*length/total_length
        if divisions == 0:
            continue
        bpoints = element.bpoints(start, subpath_start)
        for i in range(int(divisions) + 1):
            candidate = bezier_point(bpoints, i/divisions)
            if not table or candidate.distance_to(table[-1]) > threshold:
                table.append(candidate)
    return table


def _squared_distances(pt, table):
    coords = np.array([p.to_tuple() for p in table], dtype=float)
    return np.sum((coords - (pt.x, pt.y))**2, axis=1)


def closest_index(pt, table):
    """returns the index of the entry of `table` closest to pt (the first one
    on ties), or None if the table is empty."""
    if len(table) == 0:
        return None
    return int(np.argmin(_squared_distances(pt, table)))


def closest_point(pt, table):
    """returns the entry of `table` closest to pt, or None if the table is
    empty."""
    idx = closest_index(pt, table)
    if idx is None:
        return None
    return table[idx]


def percent_along(pt, table):
    """returns how far along the path (as a fraction in [0, 1] of the table)
    the entry closest to pt lies.  Tables with fewer than two entries give
    0."""
    if len(table) < 2:
        return 0.0
    return closest_index(pt, table)/(len(table) - 1)


class LookupTable(Sequence):
    """An immutable lookup table built once from a path snapshot."""

    def __init__(self, points=()):
        self._points = tuple(points)

    @classmethod
    def from_elements(cls, elements, capacity=LOOKUP_TABLE_CAPACITY,
                      threshold=LOOKUP_TABLE_THRESHOLD):
        return cls(generate_lookup_table(elements, capacity=capacity,
                                         threshold=threshold))

    def __getitem__(self, index):
        return self._points[index]

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return 'LookupTable(%d points)' % len(self._points)

    def __eq__(self, other):
        if not isinstance(other, LookupTable):
            return NotImplemented
        return self._points == other._points

    def __ne__(self, other):
        if not isinstance(other, LookupTable):
            return NotImplemented
        return not self == other

    def __hash__(self):
        return hash(self._points)

    def closest_index(self, pt):
        return closest_index(pt, self._points)

    def closest_point(self, pt):
        return closest_point(pt, self._points)

    def percent(self, pt):
        return percent_along(pt, self._points)

    def point_at(self, percent):
        """returns the entry `percent` of the way through the table, i.e. the
        inverse of percent().  Returns None for an empty table."""
        if not self._points:
            return None
        idx = int(round(percent*(len(self._points) - 1)))
        return self._points[min(max(idx, 0), len(self._points) - 1)]
