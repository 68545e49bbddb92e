"""
ConstructionOptions

Per-call options for object construction
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from .class_resolver import ClassRef
from .container import ServiceContainer

# camelCase option names accepted alongside the field names
_OPTION_ALIASES = {
    'extraArgs': 'extra_args',
    'serviceContainer': 'service_container',
    'assertClass': 'assert_class',
    'allowClassName': 'allow_class_name',
    'allowCallable': 'allow_callable',
}


@dataclass(frozen=True)
class ConstructionOptions:
    """Options controlling a single construction.

    Attributes:
        extra_args: Arguments passed before everything else
        service_container: Lookup for ``services`` / ``optional_services``
        assert_class: Class (or class name) the result must be an instance of
        allow_class_name: Accept a bare class or class name as the specification
        allow_callable: Accept a bare callable as the specification
    """
    extra_args: Tuple[Any, ...] = ()
    service_container: Optional[ServiceContainer] = None
    assert_class: Optional[ClassRef] = None
    allow_class_name: bool = False
    allow_callable: bool = False

    def __post_init__(self):
        if isinstance(self.extra_args, (str, bytes)):
            raise TypeError(
                f"extra_args must be a list of arguments, got {type(self.extra_args).__name__}"
            )
        if self.assert_class is not None and not isinstance(self.assert_class, (str, type)):
            raise TypeError(
                "assert_class must be a class or a class name, "
                f"got {type(self.assert_class).__name__}"
            )
        # Lists from config files become tuples so the options stay immutable
        if not isinstance(self.extra_args, tuple):
            object.__setattr__(self, 'extra_args', tuple(self.extra_args or ()))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'ConstructionOptions':
        """Build options from a mapping.

        Keys may use snake_case or the camelCase spelling
        (``extraArgs``, ``serviceContainer``...).

        Raises:
            TypeError: On an unknown key
        """
        normalized = {_OPTION_ALIASES.get(key, key): value for key, value in options.items()}
        return cls(**normalized)

    @classmethod
    def coerce(
        cls,
        options: Union['ConstructionOptions', Mapping[str, Any], None],
    ) -> 'ConstructionOptions':
        """Accept options as an instance, a mapping, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise TypeError(
            f"options must be a ConstructionOptions or a mapping, got {type(options).__name__}"
        )

    def replace(self, **changes: Any) -> 'ConstructionOptions':
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
