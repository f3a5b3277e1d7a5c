from .attributes import parse_attributes, select_text
from .convertors import coerce, to_float, to_int
from .descriptors import CoercionKind, Custom, DescriptorTable, FieldDescriptor
from .document import Node, Record
from .html import HtmlParser
from .pagination import parse_max_page
from .pairs import parse_delimited_pairs, parse_id_name
from .steps import StepList
from .urls import parse_url_id, parse_url_object

__all__ = [
    "parse_attributes",
    "select_text",
    "coerce",
    "to_float",
    "to_int",
    "CoercionKind",
    "Custom",
    "DescriptorTable",
    "FieldDescriptor",
    "Node",
    "Record",
    "HtmlParser",
    "parse_max_page",
    "parse_delimited_pairs",
    "parse_id_name",
    "StepList",
    "parse_url_id",
    "parse_url_object",
]
