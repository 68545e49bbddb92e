"""
Test Configuration and Utilities

Common base classes and helper functions for ObjectFactory tests
"""

import unittest

from fixtures import RecordingContainer, Service


class ObjectFactoryTestCase(unittest.TestCase):
    """
    Base test case class for ObjectFactory tests.

    Provides a fresh recording service container holding
    the services Foo, Bar and Baz for each test.
    """

    def setUp(self):
        """Create the services and the container"""
        self.services = {
            'Foo': Service('foo'),
            'Bar': Service('bar'),
            'Baz': Service('baz'),
        }
        self.container = RecordingContainer(self.services)
