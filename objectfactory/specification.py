"""
Specification

Normalizes and validates object specifications
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

from .arguments import positional_args
from .class_resolver import ClassRef, resolve_class
from .exceptions import InvalidSpecificationError


@dataclass(frozen=True)
class Specification:
    """Validated object specification.

    Exactly one of ``target`` and ``factory`` is set. ``expected_class``
    is only set when a specification names both a factory and a class,
    in which case the factory constructs and the class is checked
    against the result.
    """
    raw: Mapping
    target: Optional[Type] = None
    factory: Optional[Callable[..., Any]] = None
    expected_class: Optional[ClassRef] = None
    args: Tuple[Any, ...] = ()
    services: Tuple[Optional[str], ...] = ()
    optional_services: Tuple[Optional[str], ...] = ()
    calls: Tuple[Tuple[str, Tuple[Any, ...]], ...] = ()
    closure_expansion: bool = True
    spec_is_arg: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping) -> 'Specification':
        """Validate a specification mapping.

        Nothing is constructed and no service is looked up here, so a
        malformed specification fails without side effects.

        Args:
            raw: The specification mapping

        Returns:
            The validated Specification

        Raises:
            InvalidSpecificationError: When the mapping is malformed
        """
        factory = raw.get('factory')
        class_ref = raw.get('class')
        target = None
        expected_class = None

        if factory is not None:
            if not callable(factory):
                raise InvalidSpecificationError(
                    f"'factory' must be callable, got {type(factory).__name__}"
                )
            if class_ref is not None:
                _check_class_ref(class_ref)
                expected_class = class_ref
        elif class_ref is not None:
            _check_class_ref(class_ref)
            target = resolve_class(class_ref)
            if target is None:
                raise InvalidSpecificationError(f"Class '{class_ref}' could not be resolved")
        else:
            raise InvalidSpecificationError(
                "Provided specification lacks both 'factory' and 'class' parameters."
            )

        expansion = raw.get('closure_expansion')

        return cls(
            raw=raw,
            target=target,
            factory=factory,
            expected_class=expected_class,
            args=positional_args(raw.get('args')),
            services=_service_names(raw.get('services'), 'services'),
            optional_services=_service_names(raw.get('optional_services'), 'optional_services'),
            calls=_calls(raw.get('calls')),
            closure_expansion=expansion is None or expansion is True,
            spec_is_arg=bool(raw.get('spec_is_arg')),
        )


def normalize_specification(
    spec: Any,
    allow_class_name: bool = False,
    allow_callable: bool = False,
) -> Specification:
    """Turn the raw first argument of a construction into a Specification.

    Besides a mapping, accepts two shorthands: a class (or a string that
    resolves to a class) stands for ``{'class': spec}``, and any other
    callable stands for ``{'factory': spec}``.

    Args:
        spec: Specification mapping, class, class name, or callable
        allow_class_name: Permit the class shorthand
        allow_callable: Permit the callable shorthand

    Raises:
        InvalidSpecificationError: When the shorthand is not permitted or
            the value is not a specification at all
    """
    if isinstance(spec, Mapping):
        return Specification.from_mapping(spec)

    if isinstance(spec, type) or (isinstance(spec, str) and resolve_class(spec) is not None):
        if not allow_class_name:
            raise InvalidSpecificationError(
                "Passing a raw class name is not allowed here. "
                "Use {'class': class_name} instead."
            )
        return Specification.from_mapping({'class': spec})

    if callable(spec):
        if not allow_callable:
            raise InvalidSpecificationError(
                "Passing a raw callable is not allowed here. "
                "Use {'factory': callable} instead."
            )
        return Specification.from_mapping({'factory': spec})

    raise InvalidSpecificationError("Provided specification is not a mapping.")


def _check_class_ref(class_ref: Any) -> None:
    if not isinstance(class_ref, (str, type)):
        raise InvalidSpecificationError(
            f"'class' must be a class or a dotted class name, got {type(class_ref).__name__}"
        )


def _service_names(value: Any, key: str) -> Tuple[Optional[str], ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise InvalidSpecificationError(f"'{key}' must be a list of service names")
    for name in value:
        if name is not None and not isinstance(name, str):
            raise InvalidSpecificationError(
                f"'{key}' entries must be service names or None, got {type(name).__name__}"
            )
    return tuple(value)


def _calls(value: Any) -> Tuple[Tuple[str, Tuple[Any, ...]], ...]:
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise InvalidSpecificationError(
            f"'calls' must be a mapping of method names to argument lists, got {type(value).__name__}"
        )
    calls = []
    for method, method_args in value.items():
        if not isinstance(method, str):
            raise InvalidSpecificationError(f"'calls' keys must be method names, got {method!r}")
        calls.append((method, positional_args(method_args, f"calls.{method}")))
    return tuple(calls)
