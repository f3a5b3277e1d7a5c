"""
Base class for entity types parsed from HTML pages.

Subclasses declare, once and at class definition time:
- parser_fields: DescriptorTable driving `parse_attributes`
- parser_steps: StepList of methods composed by `parse_all`

Both declarations are validated when the subclass is created, so a malformed table,
a non-identifier step or a step without a matching method fails at import time
rather than on the first page parsed.

Example:
    class Team(HtmlParser):
        parser_fields = DescriptorTable(
            FieldDescriptor('#lnkTeamName', 'name'),
            FieldDescriptor('#lblPoints', 'points', kind=CoercionKind.FLOAT),
        )
        parser_steps = StepList('parse_attributes', '_parse_captain')

        def _parse_captain(self, document):
            return {'captain': self.parse_url_object(document.select_one('#lnkCaptain'))}
"""
from typing import Callable, ClassVar, Optional

from src.encounter.errors import ConfigurationError
from src.encounter.models.stubs import ReferenceStub
from src.encounter.parser.attributes import parse_attributes
from src.encounter.parser.descriptors import DescriptorTable
from src.encounter.parser.document import Node, Record
from src.encounter.parser.pagination import parse_max_page
from src.encounter.parser.pairs import T, parse_delimited_pairs, parse_id_name
from src.encounter.parser.steps import StepList
from src.encounter.parser.urls import parse_url_id, parse_url_object


class HtmlParser:

    parser_fields: ClassVar[Optional[DescriptorTable]] = None
    parser_steps: ClassVar[Optional[StepList]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = cls.__dict__.get('parser_fields')
        if fields is not None and not isinstance(fields, DescriptorTable):
            raise ConfigurationError(
                f"{cls.__name__}.parser_fields must be a DescriptorTable, got {type(fields).__name__}"
            )
        steps = cls.__dict__.get('parser_steps')
        if steps is not None:
            cls.parser_steps = StepList.from_declaration(steps)
        if cls.parser_steps is not None:
            cls.parser_steps.resolve(cls)

    def parse_all(self, document: Node) -> Record:
        """Run every declared step in order; later steps overwrite earlier keys."""
        if self.parser_steps is None:
            return {}
        return self.parser_steps.run(self, document)

    def parse_attributes(self, document: Node) -> Record:
        if self.parser_fields is None:
            return {}
        return parse_attributes(document, self.parser_fields)

    @staticmethod
    def parse_url_id(url: str) -> int:
        return parse_url_id(url)

    @staticmethod
    def parse_url_object(anchor: Node) -> ReferenceStub:
        return parse_url_object(anchor)

    @staticmethod
    def parse_max_page(document: Node, suffix: str) -> Optional[int]:
        return parse_max_page(document, suffix)

    @staticmethod
    def parse_id_name(pair: list[str]) -> dict:
        return parse_id_name(pair)

    @staticmethod
    def parse_delimited_pairs(raw_text: str, post_process: Callable[[list[str]], Optional[T]]) -> list[T]:
        return parse_delimited_pairs(raw_text, post_process)
