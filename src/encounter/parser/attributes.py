import logging

from src.encounter.parser.convertors import coerce
from src.encounter.parser.descriptors import DescriptorTable, FieldDescriptor
from src.encounter.parser.document import Node, Record


def select_text(document: Node, selector: str) -> str:
    """Concatenate the text of all nodes matching `selector`, in document order."""
    try:
        nodes = document.select(selector)
    except Exception:
        logging.warning("Selector %r failed; treating as no matches", selector, exc_info=True)
        return ""
    return "".join(node.get_text() for node in nodes)


def extract_field(document: Node, descriptor: FieldDescriptor):
    value = coerce(descriptor.kind, select_text(document, descriptor.selector))
    if descriptor.post_process is not None:
        value = descriptor.post_process(value)
    return value


def parse_attributes(document: Node, table: DescriptorTable) -> Record:
    """
    Build a record with one entry per descriptor of `table`.

    Descriptors are independent: a selector without matches yields an empty string
    (or zero after numeric coercion) instead of an error.
    """
    return {
        descriptor.target_field: extract_field(document, descriptor)
        for descriptor in table
    }
