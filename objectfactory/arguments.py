"""
Argument Assembly

Builds the ordered argument list for a constructor or factory call
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple, TYPE_CHECKING

from .exceptions import InvalidSpecificationError

if TYPE_CHECKING:
    from .options import ConstructionOptions
    from .specification import Specification


def positional_args(value: Any, key: str = 'args') -> Tuple[Any, ...]:
    """Validate and normalize a positional argument list.

    A list or tuple is taken as is. A mapping is accepted only when its
    keys are exactly ``0..n-1`` in iteration order.

    Args:
        value: The argument list from the specification (None means empty)
        key: Name used in error messages

    Returns:
        The arguments as a tuple

    Raises:
        InvalidSpecificationError: When the value is not purely positional
    """
    if value is None:
        return ()
    if isinstance(value, Mapping):
        if list(value.keys()) != list(range(len(value))):
            raise InvalidSpecificationError(f"'{key}' cannot be an associative mapping")
        return tuple(value.values())
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidSpecificationError(
            f"'{key}' must be a list of positional arguments, got {type(value).__name__}"
        )
    return tuple(value)


def check_service_container(spec: 'Specification', options: 'ConstructionOptions') -> None:
    """Fail early when services are requested without a container."""
    if (spec.services or spec.optional_services) and options.service_container is None:
        raise InvalidSpecificationError(
            "'services' and 'optional_services' cannot be used without a service container"
        )


def assemble_arguments(spec: 'Specification', options: 'ConstructionOptions') -> List[Any]:
    """Assemble the arguments of the main constructor/factory call.

    Order is: extra args, required services, optional services,
    literal args, then the specification itself if ``spec_is_arg``.

    Args:
        spec: Validated specification
        options: Options of the current call

    Returns:
        Argument list, lazy values not yet expanded

    Raises:
        InvalidSpecificationError: When services are used without a container
    """
    check_service_container(spec, options)
    container = options.service_container

    args: List[Any] = list(options.extra_args)

    for name in spec.services:
        args.append(None if name is None else container.get(name))

    for name in spec.optional_services:
        if name is None or not container.has(name):
            args.append(None)
        else:
            args.append(container.get(name))

    args.extend(spec.args)

    if spec.spec_is_arg:
        args.append(spec.raw)

    return args
