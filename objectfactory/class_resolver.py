"""
Class Resolver

Resolves class references given as dotted names and checks results
against expected types
"""

import builtins
import importlib
from typing import Any, Optional, Type, Union

# A class object or its dotted import path
ClassRef = Union[str, Type]


def resolve_class(ref: ClassRef) -> Optional[Type]:
    """Resolve a class reference to a class object.

    Accepts a class, a builtin name (``"dict"``) or a dotted path
    (``"package.module.ClassName"``, ``"package.module.Outer.Inner"``).
    The longest importable module prefix is used, the rest is walked
    as attributes.

    Args:
        ref: Class object or dotted name

    Returns:
        The class, or None if the reference does not name a class

    Raises:
        ImportError: When an existing module fails to import
    """
    if isinstance(ref, type):
        return ref
    if not isinstance(ref, str) or not ref:
        return None

    parts = ref.split('.')
    if len(parts) == 1:
        found = getattr(builtins, ref, None)
        return found if isinstance(found, type) else None

    for split in range(len(parts) - 1, 0, -1):
        module_name = '.'.join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only a missing prefix means "try a shorter one"; errors raised
            # while importing an existing module propagate
            if exc.name is None or not (
                exc.name == module_name or module_name.startswith(exc.name + '.')
            ):
                raise
            continue
        for attribute in parts[split:]:
            target = getattr(target, attribute, None)
            if target is None:
                return None
        return target if isinstance(target, type) else None

    return None


def type_name(cls: Type) -> str:
    """Readable name of a class for error messages."""
    if cls.__module__ == 'builtins':
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def is_instance_of(obj: Any, expected: ClassRef) -> bool:
    """Check ``obj`` against a class or a class name.

    Names are matched against the qualified names of the classes in the
    object's MRO, either bare (``"Mailer"``) or module-qualified
    (``"myapp.mail.Mailer"``). Names are never imported, so an unknown
    name does not match.
    """
    if isinstance(expected, type):
        return isinstance(obj, expected)
    for klass in type(obj).__mro__:
        if expected in (klass.__qualname__, f"{klass.__module__}.{klass.__qualname__}"):
            return True
    return False


def describe(ref: ClassRef) -> str:
    """Readable name of a class reference."""
    return type_name(ref) if isinstance(ref, type) else str(ref)
