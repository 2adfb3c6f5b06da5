from .ServiceRecord import ServiceRecord
from .TagErrors import (
    InvalidBooleanError,
    InvalidGroupListError,
    InvalidNumberError,
    InvalidServiceListError,
    RegistryConfigError,
    TagError,
    UnrecognizedTagError,
)
from .TagType import TagType

__all__ = [
    "InvalidBooleanError",
    "InvalidGroupListError",
    "InvalidNumberError",
    "InvalidServiceListError",
    "RegistryConfigError",
    "ServiceRecord",
    "TagError",
    "TagType",
    "UnrecognizedTagError",
]
