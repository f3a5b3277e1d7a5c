"""
Ordered, immutable lists of named extraction steps.

An entity type declares which of its methods make up a full parse:

    class Game(HtmlParser):
        parser_steps = StepList('parse_attributes', '_parse_authors', '_parse_money')

`StepList.run` calls every step with the document and merges the partial records
in declaration order. On key collisions the later step wins.

Steps are looked up by plain attribute name, so private steps must use a single
leading underscore (`_parse_authors`); double-underscore names are mangled by
Python and cannot be resolved.
"""
import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterator

from src.encounter.errors import ConfigurationError, UnknownStepError
from src.encounter.parser.document import Node, Record

Step = Callable[[Node], Record]


class StepList:

    __slots__ = ('_names',)

    _names: tuple[str, ...]

    def __init__(self, *names: str):
        seen: set[str] = set()
        for name in names:
            if not isinstance(name, str) or not name.isidentifier():
                raise ConfigurationError(f"Parser step must be an identifier, got {name!r}")
            if name in seen:
                raise ConfigurationError(f"Duplicate parser step '{name}'")
            seen.add(name)
        object.__setattr__(self, '_names', tuple(names))

    @classmethod
    def from_declaration(cls, declared: Any) -> 'StepList':
        """Accept a StepList or a plain list/tuple of names; reject any other shape."""
        if isinstance(declared, StepList):
            return declared
        if isinstance(declared, (str, bytes)) or not isinstance(declared, Sequence):
            raise ConfigurationError(
                f"Parser steps must be a list of identifiers, got {type(declared).__name__}"
            )
        return cls(*declared)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other):
        return isinstance(other, StepList) and self._names == other._names

    def __hash__(self):
        return hash(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def resolve(self, owner: Any) -> tuple[tuple[str, Step], ...]:
        """Look every step up on `owner` (a class or an instance); private names are allowed."""
        resolved = []
        for name in self._names:
            step = getattr(owner, name, None)
            if step is None or not callable(step):
                raise UnknownStepError(name, owner)
            resolved.append((name, step))
        return tuple(resolved)

    def run(self, owner: Any, document: Node) -> Record:
        result: Record = {}
        for name, step in self.resolve(owner):
            logging.debug("Running parser step %s", name)
            result.update(step(document))
        return result

    def __repr__(self):
        return f'StepList({", ".join(self._names)})'
