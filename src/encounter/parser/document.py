"""
Minimal view of a parsed HTML document used by the parser.

BeautifulSoup's `BeautifulSoup` and `Tag` satisfy this protocol; any other tree
exposing CSS selection, text content and attribute access works as well.
"""
from typing import Any, Iterable, Optional, Protocol


class Node(Protocol):

    def select(self, selector: str) -> Iterable['Node']:
        ...

    def get_text(self) -> str:
        ...

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...


Record = dict[str, Any]
