"""
Public API

Module-level shortcuts for the stateless ObjectFactory entry points.

Example::

    from objectfactory import construct

    mailer = construct(
        {'class': 'myapp.mail.Mailer', 'args': ['smtp.example.org']},
        {'assert_class': 'myapp.mail.Mailer'},
    )
"""

from typing import Any, Sequence

from .class_resolver import ClassRef
from .factory import ObjectFactory, Options


def construct(spec: Any, options: Options = None) -> Any:
    """Construct an object from a specification.

    See :meth:`ObjectFactory.get_object_from_spec`.
    """
    return ObjectFactory.get_object_from_spec(spec, options)


def construct_from_class_and_args(class_ref: ClassRef, args: Sequence[Any]) -> Any:
    """Instantiate a class with positional arguments, skipping specification parsing.

    See :meth:`ObjectFactory.construct_class_instance`.
    """
    return ObjectFactory.construct_class_instance(class_ref, args)
