"""
Static field descriptors mapping a CSS selector to a record field.

Classes:
- CoercionKind: built-in numeric coercions (none, float, int)
- Custom: user supplied coercion function; together with CoercionKind forms the Coercion union
- FieldDescriptor: one selector -> field rule with optional coercion and post-processing
- DescriptorTable: validated, immutable set of descriptors declared once per entity type

Example:
    TEAM_FIELDS = DescriptorTable(
        FieldDescriptor('#lnkTeamName', 'name'),
        FieldDescriptor('#lblPoints', 'points', kind=CoercionKind.FLOAT),
        FieldDescriptor('#lblCreated', 'created_at', post_process=str.strip),
    )
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Union

from src.encounter.errors import ConfigurationError


class CoercionKind(Enum):

    NONE = 'none'
    FLOAT = 'float'
    INT = 'int'


@dataclass(frozen=True)
class Custom:
    """Coercion through an arbitrary function of the raw text."""

    fn: Callable[[str], Any]


Coercion = Union[CoercionKind, Custom]


@dataclass(frozen=True)
class FieldDescriptor:

    selector: str
    target_field: str
    kind: Coercion = CoercionKind.NONE
    post_process: Optional[Callable[[Any], Any]] = None

    def validate(self) -> None:
        """Raise ConfigurationError if any part of the descriptor is malformed."""
        if not isinstance(self.selector, str) or not self.selector.strip():
            raise ConfigurationError(f"Descriptor selector must be a non-empty string, got {self.selector!r}")
        if not isinstance(self.target_field, str) or not self.target_field.isidentifier():
            raise ConfigurationError(f"Descriptor target field must be an identifier, got {self.target_field!r}")
        if isinstance(self.kind, Custom):
            if not callable(self.kind.fn):
                raise ConfigurationError(f"Custom coercion for '{self.target_field}' is not callable")
        elif not isinstance(self.kind, CoercionKind):
            raise ConfigurationError(f"Unknown coercion {self.kind!r} for '{self.target_field}'")
        if self.post_process is not None and not callable(self.post_process):
            raise ConfigurationError(f"post_process for '{self.target_field}' is not callable")


class DescriptorTable:
    """
    Immutable ordered collection of field descriptors.

    Every descriptor is validated on construction and target fields must be unique,
    so a record extracted with this table always has exactly one key per descriptor.
    """

    __slots__ = ('_descriptors',)

    _descriptors: tuple[FieldDescriptor, ...]

    def __init__(self, *descriptors: FieldDescriptor):
        seen: set[str] = set()
        for descriptor in descriptors:
            if not isinstance(descriptor, FieldDescriptor):
                raise ConfigurationError(f"Expected FieldDescriptor, got {type(descriptor).__name__}")
            descriptor.validate()
            if descriptor.target_field in seen:
                raise ConfigurationError(f"Duplicate target field '{descriptor.target_field}'")
            seen.add(descriptor.target_field)
        object.__setattr__(self, '_descriptors', tuple(descriptors))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def target_fields(self) -> tuple[str, ...]:
        return tuple(d.target_field for d in self._descriptors)

    def __repr__(self):
        return f'DescriptorTable({", ".join(self.target_fields)})'
