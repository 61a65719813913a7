#!/usr/bin/env python3
"""Tests for ParameterSet construction and change_param."""

import unittest

from anyparams.core.exceptions import (
    ConfigurationError,
    DuplicateNameError,
    FormatError,
    NotFoundError,
)
from anyparams.params.parameter_set import ParameterSet, split_token


class TestParameterSetConstruction(unittest.TestCase):
    """Test building a ParameterSet from tokens."""

    def test_preserves_order(self):
        tokens = ['c=3', 'a=1', 'b=2']
        params = ParameterSet(tokens)

        self.assertEqual(params.names, ['c', 'a', 'b'])
        self.assertEqual(params.values, ['3', '1', '2'])
        self.assertEqual(list(params), [('c', '3'), ('a', '1'), ('b', '2')])
        self.assertEqual(params.to_tokens(), tokens)

    def test_empty(self):
        params = ParameterSet()
        self.assertEqual(len(params), 0)
        self.assertEqual(params.names, [])
        self.assertEqual(ParameterSet([]), params)

    def test_from_tokens_same_as_constructor(self):
        self.assertEqual(ParameterSet.from_tokens(['x=1']), ParameterSet(['x=1']))

    def test_empty_value_allowed(self):
        params = ParameterSet(['name='])
        self.assertEqual(params.get('name'), '')

    def test_duplicate_name_at_any_position(self):
        for tokens in (['a=1', 'a=2'], ['a=1', 'b=2', 'a=3'], ['b=2', 'c=3', 'd=4', 'c=5']):
            with self.subTest(tokens=tokens):
                with self.assertRaises(DuplicateNameError):
                    ParameterSet(tokens)

    def test_duplicate_name_reports_name(self):
        with self.assertRaises(DuplicateNameError) as ctx:
            ParameterSet(['NN=10', 'ef=20', 'NN=5'])
        self.assertEqual(ctx.exception.name, 'NN')

    def test_malformed_tokens(self):
        for token in ('foo', 'a=b=c', '=1', ''):
            with self.subTest(token=token):
                with self.assertRaises(FormatError) as ctx:
                    ParameterSet(['ok=1', token])
                self.assertEqual(ctx.exception.token, token)

    def test_errors_are_configuration_errors(self):
        with self.assertRaises(ConfigurationError):
            ParameterSet(['foo'])

    def test_no_whitespace_trimming(self):
        params = ParameterSet([' a = 1 '])
        self.assertEqual(params.names, [' a '])
        self.assertEqual(params.values, [' 1 '])

    def test_split_token(self):
        self.assertEqual(split_token('k=v'), ('k', 'v'))

    def test_from_lists_is_unchecked(self):
        params = ParameterSet.from_lists(['a', 'a'], ['1', '2'])
        self.assertEqual(params.names, ['a', 'a'])

    def test_names_returns_copy(self):
        params = ParameterSet(['a=1'])
        params.names.append('b')
        self.assertEqual(params.names, ['a'])

    def test_contains_and_get(self):
        params = ParameterSet(['a=1'])
        self.assertIn('a', params)
        self.assertNotIn('b', params)
        self.assertEqual(params.get('a'), '1')
        self.assertIsNone(params.get('b'))
        self.assertEqual(params.get('b', 'x'), 'x')


class TestChangeParam(unittest.TestCase):
    """Test overwriting values by name."""

    def setUp(self):
        self.params = ParameterSet(['NN=10', 'eps=0.5', 'flag=0'])

    def test_overwrite_int(self):
        self.params.change_param('NN', 20)
        self.assertEqual(self.params.get('NN'), '20')
        self.assertEqual(self.params.names, ['NN', 'eps', 'flag'])

    def test_overwrite_float(self):
        self.params.change_param('eps', 0.25)
        self.assertEqual(self.params.get('eps'), '0.25')

    def test_overwrite_bool(self):
        self.params.change_param('flag', True)
        self.assertEqual(self.params.get('flag'), '1')

    def test_overwrite_str(self):
        self.params.change_param('NN', 'abc')
        self.assertEqual(self.params.get('NN'), 'abc')

    def test_missing_name(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.params.change_param('missing', 1)
        self.assertEqual(ctx.exception.name, 'missing')
        self.assertEqual(self.params.to_tokens(), ['NN=10', 'eps=0.5', 'flag=0'])


if __name__ == '__main__':
    unittest.main()
