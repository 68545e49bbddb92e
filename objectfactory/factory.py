"""
ObjectFactory

This module constructs objects from declarative specifications. It is the
terminal step of configuration-driven dependency injection: a mapping
describes what to build, and the factory turns it into a live object.

A specification names either a ``class`` or a ``factory`` and may add:

- ``args``: positional constructor/factory arguments
- ``services`` / ``optional_services``: names looked up in the service
  container and passed before ``args``
- ``calls``: methods to call on the new object ("setter injection")
- ``closure_expansion``: set to False to pass lazy values unevaluated
- ``spec_is_arg``: pass the specification itself as the last argument

Example::

    mailer = ObjectFactory.get_object_from_spec(
        {
            'class': 'myapp.mail.Mailer',
            'services': ['Config'],
            'args': ['smtp.example.org'],
            'calls': {'set_logger': [Deferred(make_logger)]},
        },
        {'service_container': container},
    )
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from .arguments import assemble_arguments, positional_args
from .class_resolver import ClassRef, describe, is_instance_of, resolve_class, type_name
from .container import ServiceContainer
from .deferred import expand_deferred
from .exceptions import InvalidSpecificationError, UnexpectedResultError
from .options import ConstructionOptions
from .specification import Specification, normalize_specification

logger = logging.getLogger(__name__)

Options = Union[ConstructionOptions, Mapping[str, Any], None]

# Results of these exact types are values, not objects
_NON_OBJECT_TYPES = (
    type(None), bool, int, float, complex, str, bytes,
    list, tuple, dict, set, frozenset,
)


class ObjectFactory:
    """Construct objects from specifications.

    The class methods are stateless and can be used directly. An instance
    holds a service container and passes it to every construction made
    through :meth:`create_object`.

    Attributes:
        _service_container: Container used by create_object()

    Example::

        factory = ObjectFactory(container)
        repo = factory.create_object({
            'class': UserRepository,
            'services': ['Database'],
        })
    """

    def __init__(self, service_container: Optional[ServiceContainer] = None):
        self._service_container = service_container

    def create_object(self, spec: Any, options: Options = None) -> Any:
        """Construct an object using this factory's service container.

        The held container always replaces any ``service_container``
        given in ``options``.

        Args:
            spec: Specification (see :meth:`get_object_from_spec`)
            options: Construction options

        Returns:
            The constructed object
        """
        options = ConstructionOptions.coerce(options).replace(
            service_container=self._service_container
        )
        return self.get_object_from_spec(spec, options)

    @classmethod
    def get_object_from_spec(cls, spec: Any, options: Options = None) -> Any:
        """Instantiate an object based on a specification.

        Arguments are assembled in this order: ``extra_args`` from the
        options, required ``services``, ``optional_services``, ``args``,
        and finally the specification itself when ``spec_is_arg`` is set.
        Top-level lazy values among them are evaluated unless
        ``closure_expansion`` is False.

        Args:
            spec: Specification mapping. With ``allow_class_name`` a class
                or class name is accepted, with ``allow_callable`` a callable.
            options: ConstructionOptions or a mapping of option names

        Returns:
            The constructed object

        Raises:
            InvalidSpecificationError: When the specification is malformed.
                Raised before anything is constructed.
            UnexpectedResultError: When the result is not an object or
                not an instance of the expected class

        Any exception raised by the constructor, the factory, a service
        lookup, a lazy value or a setter call propagates unchanged.
        """
        options = ConstructionOptions.coerce(options)
        specification = normalize_specification(
            spec,
            allow_class_name=options.allow_class_name,
            allow_callable=options.allow_callable,
        )

        args = assemble_arguments(specification, options)
        if specification.closure_expansion:
            args = expand_deferred(args)

        obj = cls._invoke(specification, args)

        if options.assert_class is not None and not is_instance_of(obj, options.assert_class):
            raise UnexpectedResultError(
                f"Expected instance of {describe(options.assert_class)}, "
                f"got {type_name(type(obj))}"
            )

        cls._apply_calls(obj, specification)
        return obj

    @classmethod
    def construct_class_instance(cls, class_ref: ClassRef, args: Sequence[Any]) -> Any:
        """Construct an instance of a class from positional arguments.

        Args:
            class_ref: Class or dotted class name
            args: Positional constructor arguments

        Returns:
            The new instance

        Raises:
            InvalidSpecificationError: When ``args`` is not purely positional
                or the class cannot be resolved
        """
        args = positional_args(args)
        target = resolve_class(class_ref)
        if target is None:
            raise InvalidSpecificationError(f"Class '{class_ref}' could not be resolved")
        return target(*args)

    @classmethod
    def _invoke(cls, spec: Specification, args: list) -> Any:
        if spec.factory is not None:
            logger.debug("Calling factory %r with %d argument(s)", spec.factory, len(args))
            obj = spec.factory(*args)
            _check_object(obj, 'factory')
            if spec.expected_class is not None and not is_instance_of(obj, spec.expected_class):
                raise UnexpectedResultError(
                    f"'factory' was expected to return an instance of "
                    f"{describe(spec.expected_class)}, got {type_name(type(obj))}"
                )
            return obj

        logger.debug("Constructing %s with %d argument(s)", type_name(spec.target), len(args))
        if not args:
            obj = spec.target()
        else:
            obj = cls.construct_class_instance(spec.target, args)
        _check_object(obj, 'class')
        return obj

    @staticmethod
    def _apply_calls(obj: Any, spec: Specification) -> None:
        for method, method_args in spec.calls:
            if spec.closure_expansion:
                method_args = expand_deferred(method_args)
            logger.debug("Calling %s.%s() with %d argument(s)",
                         type_name(type(obj)), method, len(method_args))
            getattr(obj, method)(*method_args)


def _check_object(obj: Any, source: str) -> None:
    if type(obj) in _NON_OBJECT_TYPES:
        raise UnexpectedResultError(
            f"'{source}' did not return an object, got {type_name(type(obj))}"
        )
