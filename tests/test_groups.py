import unittest

from atmfjstc.lib.multi_values.errors import BindingShapeError
from atmfjstc.lib.multi_values.groups import BindingGroup, split_tail, parse_binding_group, parse_binding_groups


def _expr(env):
    return 1


class SplitTailTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(split_tail(['a', 'b', 'c']), (('a', 'b'), ('c',)))

    def test_minimal(self):
        self.assertEqual(split_tail(['a', 'b']), (('a',), ('b',)))

    def test_too_short(self):
        with self.assertRaises(BindingShapeError):
            split_tail(['a'])

    def test_empty(self):
        with self.assertRaises(BindingShapeError):
            split_tail([])

    def test_min_head(self):
        with self.assertRaises(BindingShapeError):
            split_tail(['a', 'b'], min_head=2)

        self.assertEqual(split_tail(['a'], min_head=0), ((), ('a',)))


class ParseBindingGroupTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(parse_binding_group(('a', 'b', _expr)), BindingGroup(names=('a', 'b'), expression=_expr))

    def test_list(self):
        self.assertEqual(parse_binding_group(['a', _expr]).names, ('a',))

    def test_already_parsed(self):
        group = BindingGroup(names=('a',), expression=_expr)

        self.assertIs(parse_binding_group(group), group)

    def test_already_parsed_without_names(self):
        with self.assertRaises(BindingShapeError):
            parse_binding_group(BindingGroup(names=(), expression=_expr))

    def test_already_parsed_bad_name(self):
        for bad in ['#a:1', '', 3]:
            with self.assertRaises(BindingShapeError):
                parse_binding_group(BindingGroup(names=(bad,), expression=_expr))

    def test_already_parsed_uncallable_expression(self):
        with self.assertRaises(BindingShapeError):
            parse_binding_group(BindingGroup(names=('a',), expression=5))

    def test_names_shadowed_by_environment_attributes(self):
        for reserved in ['items', 'keys', 'values', 'get', 'extend', 'coerce', '_chain', '__init__']:
            with self.assertRaises(BindingShapeError):
                parse_binding_group([reserved, _expr])

    def test_no_expression(self):
        with self.assertRaises(BindingShapeError):
            parse_binding_group(['a'])

    def test_no_names(self):
        with self.assertRaises(BindingShapeError):
            parse_binding_group([_expr])

    def test_uncallable_expression(self):
        with self.assertRaises(BindingShapeError):
            parse_binding_group(['a', 'b'])

    def test_bad_name(self):
        for bad in [1, 'not valid', '', None]:
            with self.assertRaises(BindingShapeError):
                parse_binding_group([bad, _expr])

    def test_not_a_sequence(self):
        for bad in ['ab', 12, None]:
            with self.assertRaises(BindingShapeError):
                parse_binding_group(bad)


class ParseBindingGroupsTest(unittest.TestCase):
    def test_basic(self):
        groups = parse_binding_groups([('a', 'b', _expr), ('c', _expr)])

        self.assertEqual([group.names for group in groups], [('a', 'b'), ('c',)])

    def test_empty(self):
        self.assertEqual(parse_binding_groups([]), [])

    def test_error_index(self):
        with self.assertRaises(BindingShapeError) as cm:
            parse_binding_groups([('a', _expr), ('b',)])

        self.assertEqual(cm.exception.index, 1)
        self.assertEqual(cm.exception.group, ('b',))
        self.assertIsInstance(cm.exception.__cause__, BindingShapeError)
