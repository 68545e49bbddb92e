"""
Test Fixtures

Common test classes used across test modules
"""


class ObjectFactoryTestFixture:
    """Records the arguments passed to its constructor and setter"""

    def __init__(self, *args):
        self.args = list(args)
        self.setter_args = None
        self.setter_calls = 0

    def setter(self, *setter_args):
        """Dependency injection setter stub"""
        self.setter_args = list(setter_args)
        self.setter_calls += 1


class FixtureSubclass(ObjectFactoryTestFixture):
    """Subclass for instance checks"""
    pass


class Unrelated:
    """Class unrelated to the fixture"""
    pass


class Service:
    """Named service stored in a container"""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Service({self.name!r})"


class Outer:
    """Holder for a nested class"""

    class Inner:
        def __init__(self, value=None):
            self.value = value


class FailingSetter:
    """Setter that always fails"""

    def __init__(self):
        self.after_calls = 0

    def explode(self):
        raise RuntimeError("setter failed")

    def after(self):
        self.after_calls += 1


class RecordingContainer:
    """Service container that records every has()/get() call"""

    def __init__(self, services):
        self.services = dict(services)
        self.log = []

    def has(self, name):
        self.log.append(('has', name))
        return name in self.services

    def get(self, name):
        self.log.append(('get', name))
        if name in self.services:
            return self.services[name]
        raise KeyError(f"Service {name} not found")


def qualified_name(cls) -> str:
    """Dotted import path of a test class"""
    return f"{cls.__module__}.{cls.__qualname__}"
