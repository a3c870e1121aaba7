# External dependencies
import unittest
import random

# Internal dependencies
from polybezier import *
from polybezier.polybezier import RANDOM_RANGE


def kinds(pb):
    return [e.type for e in pb]


class NotificationTest(unittest.TestCase):

    def setUp(self):
        self.pb = PolyBezier.from_string('m 0 0 l 10 0 l 10 10')
        self.calls = []
        self.pb.subscribe(self.calls.append)

    def test_every_mutation_notifies(self):
        self.pb.add('line', [Point(0, 10)])
        self.pb.close_subpath()
        self.pb.clean_up()
        self.pb.subdivide(2)
        self.pb.drag(self.pb[1].id, 0, Size(1, 1))
        self.pb.commit()
        self.pb.delete([self.pb[1].id])
        self.pb.update('m 1 1 l 2 2')
        self.pb.append(EditableElement.close())
        del self.pb[-1]
        self.pb.clear()
        self.assertEqual(len(self.calls), 11)
        self.assertTrue(all(c is self.pb for c in self.calls))

    def test_unsubscribe(self):
        self.pb.unsubscribe(self.calls.append)
        self.pb.add('line', [Point(0, 10)])
        self.assertEqual(self.calls, [])

    def test_sequence_methods_notify_once(self):
        self.pb.extend([Line(Point(0, 10)), Close()])
        self.assertEqual(len(self.calls), 1)
        self.pb.reverse()
        self.assertEqual(len(self.calls), 2)
        self.pb += [MoveTo(Point(5, 5)), Line(Point(6, 6))]
        self.assertEqual(len(self.calls), 3)
        self.assertEqual(len(self.pb), 7)

    def test_delete_of_unknown_ids_does_not_notify(self):
        self.pb.delete(['missing'])
        self.assertEqual(self.calls, [])

    def test_ignored_kind_does_not_notify(self):
        self.pb.add('move')
        self.pb.add('close')
        self.assertEqual(self.calls, [])
        self.assertEqual(len(self.pb), 3)


class ConversionTest(unittest.TestCase):

    def test_string(self):
        pathdef = 'm 0.0 0.0 l 10.0 0.0 q 10.0 10.0 15.0 5.0 h'
        pb = PolyBezier.from_string(pathdef)
        self.assertEqual(pb.string, pathdef)
        self.assertEqual(kinds(pb), ['move', 'line', 'quad', 'close'])
        self.assertEqual(pb.to_elements(), parse_path(pathdef))

    def test_update(self):
        pb = PolyBezier()
        self.assertEqual(pb.string, '')
        pb.update('m 1 1 c 2 2 3 3 4 4')
        self.assertEqual(kinds(pb), ['move', 'cubic'])
        self.assertRaises(ValueError, pb.update, 'l 1')

    def test_plain_elements_are_wrapped(self):
        pb = PolyBezier([MoveTo(Point(1, 1)), Line(Point(2, 2))])
        self.assertTrue(all(isinstance(e, EditableElement) for e in pb))
        self.assertEqual(pb.string, 'm 1.0 1.0 l 2.0 2.0')

    def test_sequence_methods_wrap_plain_elements(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1')
        pb.append(Line(Point(2, 2)))
        self.assertIsInstance(pb[-1], EditableElement)
        self.assertEqual(pb.string, 'm 0.0 0.0 l 1.0 1.0 l 2.0 2.0')

        pb[1] = Quad(Point(3, 3), Point(1, 0))
        pb.insert(1, Line(Point(0, 5)))
        pb.extend([Close()])
        self.assertTrue(all(isinstance(e, EditableElement) for e in pb))
        self.assertEqual(pb.string, 'm 0.0 0.0 l 0.0 5.0 q 3.0 3.0 1.0 0.0 '
                                    'l 2.0 2.0 h')

        pb[1:3] = [Cubic(Point(4, 4), Point(1, 1), Point(2, 2))]
        self.assertEqual(pb.string, 'm 0.0 0.0 c 4.0 4.0 1.0 1.0 2.0 2.0 '
                                    'l 2.0 2.0 h')
        pb.clean_up()
        pb.subdivide(2)
        self.assertEqual(kinds(pb), ['move', 'cubic', 'cubic', 'line',
                                     'line', 'line', 'close'])

    def test_index_of(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1')
        self.assertEqual(pb.index_of(pb[1].id), 1)
        self.assertRaises(KeyError, pb.index_of, 'missing')

    def test_lookup_table(self):
        pb = PolyBezier.from_string('m 0 0 l 100 0')
        table = pb.lookup_table()
        self.assertIsInstance(table, LookupTable)
        self.assertEqual(table, LookupTable.from_elements(pb.to_elements()))
        self.assertEqual(table.closest_point(Point(-5, 0)), Point(0, 0))


class DeleteTest(unittest.TestCase):

    def test_delete_move_promotes_next_point(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0 l 10 10 h')
        pb.delete([pb[0].id])
        self.assertEqual(pb.string, 'm 10.0 0.0 l 10.0 10.0 h')

    def test_leading_close_becomes_move(self):
        pb = PolyBezier.from_string('m 5 5 l 10 0 l 10 10 h')
        pb.delete([e.id for e in pb[:3]])
        self.assertEqual(pb.string, 'm 5.0 5.0')

    def test_delete_middle(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0 l 10 10 l 0 10')
        pb.delete([pb[2].id])
        self.assertEqual(pb.string, 'm 0.0 0.0 l 10.0 0.0 l 0.0 10.0')

    def test_delete_everything(self):
        pb = PolyBezier.from_string('m 3 4 l 10 0 q 10 10 5 5')
        pb.delete([e.id for e in pb])
        self.assertEqual(pb.string, 'm 3.0 4.0')

    def test_two_elements(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0')
        pb.delete([pb[1].id])
        self.assertEqual(pb.string, 'm 0.0 0.0')

        pb = PolyBezier.from_string('m 0 0 l 10 0')
        pb.delete([pb[0].id])
        self.assertEqual(pb.string, 'm 10.0 0.0')

        pb = PolyBezier.from_string('m 0 0 h')
        pb.delete([pb[1].id])
        self.assertEqual(pb.string, 'm 0.0 0.0')

    def test_delete_drops_repeated_closes(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0 h l 5 5 h')
        pb.delete([pb[3].id])
        self.assertEqual(kinds(pb), ['move', 'line', 'close'])

    def test_unknown_ids_leave_two_elements_alone(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0')
        pb.delete(['missing'])
        self.assertEqual(pb.string, 'm 0.0 0.0 l 10.0 0.0')
        pb.delete([])
        self.assertEqual(pb.string, 'm 0.0 0.0 l 10.0 0.0')

    def test_unknown_ids_are_ignored(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0 l 10 10')
        pb.delete(['missing'])
        self.assertEqual(pb.string, 'm 0.0 0.0 l 10.0 0.0 l 10.0 10.0')


class EditTest(unittest.TestCase):

    def test_clean_up(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1 h h h m 5 5')
        pb.clean_up()
        self.assertEqual(kinds(pb), ['move', 'line', 'close', 'move'])

    def test_clear(self):
        pb = PolyBezier.from_string('m 2 3 l 1 1 h m 5 5 l 6 6')
        pb.clear()
        self.assertEqual(pb.string, 'm 2.0 3.0')
        pb = PolyBezier()
        pb.clear()
        self.assertEqual(len(pb), 0)

    def test_close_subpath_at_end(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1')
        pb.close_subpath()
        self.assertEqual(kinds(pb), ['move', 'line', 'close'])
        pb.close_subpath()
        self.assertEqual(kinds(pb), ['move', 'line', 'close'])

    def test_close_subpath_after_selection(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1 l 2 2 l 3 3')
        pb.close_subpath([pb[0].id, pb[1].id, pb[3].id])
        self.assertEqual(kinds(pb), ['move', 'line', 'close', 'line', 'line',
                                     'close'])

    def test_subdivide(self):
        pb = PolyBezier.from_string('m 0 0 l 10 0 l 10 10 h')
        pb.subdivide(2)
        self.assertEqual(pb.string,
                         'm 0.0 0.0 l 5.0 0.0 l 10.0 0.0 l 10.0 5.0 '
                         'l 10.0 10.0 l 5.0 5.0 h')
        pb = PolyBezier.from_string('m 0 0 q 10 0 5 5')
        pb.subdivide()
        self.assertEqual(kinds(pb), ['move', 'quad', 'quad'])

    def test_add(self):
        pb = PolyBezier.from_string('m 0 0')
        pb.add('line', [Point(1, 1)])
        pb.add('cubic', [Point(3, 3), Point(1, 2), Point(2, 1)])
        self.assertEqual(pb.string,
                         'm 0.0 0.0 l 1.0 1.0 c 3.0 3.0 1.0 2.0 2.0 1.0')
        self.assertRaises(ValueError, pb.add, 'quad', [Point(1, 1)])

    def test_add_random(self):
        pb = PolyBezier.from_string('m 0 0')
        pb.add('quad', rng=random.Random(0))
        self.assertEqual(pb[-1].type, 'quad')
        low, high = RANDOM_RANGE
        for p in pb[-1].positions:
            self.assertTrue(low <= p.x <= high)
            self.assertTrue(low <= p.y <= high)

        other = PolyBezier.from_string('m 0 0')
        other.add('quad', rng=random.Random(0))
        self.assertEqual(other.string, pb.string)

    def test_new_subpath(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1')
        pb.new_subpath(Point(7, 7))
        self.assertEqual(pb.string, 'm 0.0 0.0 l 1.0 1.0 m 7.0 7.0')
        pb.new_subpath(rng=random.Random(2))
        self.assertEqual(kinds(pb), ['move', 'line', 'move', 'move'])

    def test_drag_and_commit(self):
        pb = PolyBezier.from_string('m 0 0 q 10 0 5 5')
        quad_id = pb[1].id
        pb.drag(quad_id, 1, Size(1, -2))
        self.assertEqual(pb.string, 'm 0.0 0.0 q 10.0 0.0 6.0 3.0')
        self.assertEqual(pb[1].positions[1], Point(5, 5))

        pb.drag(quad_id, 1, Size(2, 0))
        self.assertEqual(pb.string, 'm 0.0 0.0 q 10.0 0.0 7.0 5.0')

        pb.commit()
        self.assertEqual(pb[1].positions[1], Point(7, 5))
        self.assertEqual(pb[1].offsets, [Size.zero(), Size.zero()])
        self.assertEqual(pb[1].id, quad_id)
        self.assertEqual(pb.string, 'm 0.0 0.0 q 10.0 0.0 7.0 5.0')

    def test_drag_unknown_element(self):
        pb = PolyBezier.from_string('m 0 0 l 1 1')
        self.assertRaises(KeyError, pb.drag, 'missing', 0, Size(1, 1))


if __name__ == '__main__':
    unittest.main()
