"""
Shorthand Specification Tests

Tests for bare classes, class names and callables used as specifications.
"""

import unittest

from fixtures import ObjectFactoryTestFixture, qualified_name
from objectfactory import construct
from objectfactory.exceptions import InvalidSpecificationError


def make_fixture(*args):
    return ObjectFactoryTestFixture(*args)


class TestClassShorthand(unittest.TestCase):
    """Test a class or class name as the whole specification."""

    def test_class_name_not_allowed(self):
        """A raw class name needs allow_class_name."""
        with self.assertRaises(InvalidSpecificationError) as ctx:
            construct(qualified_name(ObjectFactoryTestFixture), {'extra_args': ['foo', 'bar']})

        self.assertIn("Passing a raw class name is not allowed here", str(ctx.exception))

    def test_class_name_allowed(self):
        """An allowed class name is constructed with the extra args only."""
        obj = construct(
            qualified_name(ObjectFactoryTestFixture),
            {'allow_class_name': True, 'extra_args': ['foo', 'bar']},
        )

        self.assertIsInstance(obj, ObjectFactoryTestFixture)
        self.assertEqual(obj.args, ['foo', 'bar'])

    def test_class_object_is_class_shorthand(self):
        """A class object counts as a class name, not a callable."""
        with self.assertRaises(InvalidSpecificationError) as ctx:
            construct(ObjectFactoryTestFixture, {'allow_callable': True})
        self.assertIn("raw class name", str(ctx.exception))

        obj = construct(ObjectFactoryTestFixture, {'allow_class_name': True})
        self.assertIsInstance(obj, ObjectFactoryTestFixture)


class TestCallableShorthand(unittest.TestCase):
    """Test a callable as the whole specification."""

    def test_callable_not_allowed(self):
        """A raw callable needs allow_callable."""
        with self.assertRaises(InvalidSpecificationError) as ctx:
            construct(make_fixture, {'extra_args': ['foo', 'bar']})

        self.assertIn("Passing a raw callable is not allowed here", str(ctx.exception))

    def test_callable_allowed(self):
        """An allowed callable receives the extra args."""
        obj = construct(make_fixture, {'allow_callable': True, 'extra_args': ['foo', 'bar']})

        self.assertEqual(obj.args, ['foo', 'bar'])


class TestBadSpecification(unittest.TestCase):
    """Test values that are not specifications at all."""

    def test_unknown_class_name(self):
        """A string naming no class is not a specification."""
        with self.assertRaises(InvalidSpecificationError) as ctx:
            construct('ThisDoesNotExist', {'allow_class_name': True, 'allow_callable': True})

        self.assertIn("Provided specification is not a mapping", str(ctx.exception))

    def test_other_values(self):
        """Numbers, lists and None are rejected."""
        for spec in (42, ['class'], None):
            with self.subTest(spec=spec):
                with self.assertRaises(InvalidSpecificationError):
                    construct(spec, {'allow_class_name': True, 'allow_callable': True})


if __name__ == '__main__':
    unittest.main()
