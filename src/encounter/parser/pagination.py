import re
from typing import Optional

from src.encounter.parser.document import Node

PAGE_PARAM = re.compile(r"page=(\d+)$")


def parse_max_page(document: Node, suffix: str) -> Optional[int]:
    """
    Find the highest page number linked from a paginated list.

    Only anchors whose href contains `suffix` and ends with `page=<n>` count.
    Returns None when the list has no pagination links.
    """
    pattern = re.compile(re.escape(suffix) + r".*page=\d+$")
    pages = [
        int(PAGE_PARAM.search(href).group(1))
        for href in (anchor.get("href") for anchor in document.select("a"))
        if href and pattern.search(href)
    ]
    return max(pages, default=None)
