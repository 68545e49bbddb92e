# Public API
from .api import construct, construct_from_class_and_args
from .container import MappingServiceContainer, ServiceContainer
from .deferred import Deferred, deferred, expand_deferred
from .exceptions import (
    InvalidSpecificationError,
    ObjectFactoryError,
    ServiceNotFoundError,
    UnexpectedResultError,
)
from .factory import ObjectFactory
from .options import ConstructionOptions
from .specification import Specification

__all__ = [
    "construct",
    "construct_from_class_and_args",
    "ObjectFactory",
    "ConstructionOptions",
    "Specification",
    # Services
    "ServiceContainer",
    "MappingServiceContainer",
    # Lazy values
    "Deferred",
    "deferred",
    "expand_deferred",
    # Exceptions
    "ObjectFactoryError",
    "InvalidSpecificationError",
    "UnexpectedResultError",
    "ServiceNotFoundError",
]

__version__ = '1.0.0'
