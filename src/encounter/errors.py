"""
Error taxonomy for the extraction layer.

- ConfigurationError: a step list or field descriptor table is malformed at declaration time
- UnknownStepError: a declared step name has no callable on the entity type
- UnsupportedLinkTypeError: a URL carries an entity-type code the resolver does not handle
- FormatError: an expected id pattern is absent from a URL string

Numeric coercion and attribute extraction never raise; see parser.convertors.
"""
from typing import Any


class EncounterError(Exception):
    """Base class for all extraction errors."""


class ConfigurationError(EncounterError, ValueError):
    pass


class UnknownStepError(EncounterError, AttributeError):
    def __init__(self, step: str, owner: Any):
        owner_name = owner.__name__ if isinstance(owner, type) else type(owner).__name__
        super().__init__(f"Unknown parser step '{step}' on {owner_name}")
        self.step = step
        self.owner = owner


class UnsupportedLinkTypeError(EncounterError, ValueError):
    def __init__(self, code: str, url: str):
        super().__init__(f"Unsupported link type '{code}' in {url!r}")
        self.code = code
        self.url = url


class FormatError(EncounterError, ValueError):
    def __init__(self, value: Any, message: str = "No entity id found"):
        super().__init__(f"{message}: {value!r}")
        self.value = value
