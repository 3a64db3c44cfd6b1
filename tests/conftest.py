import pytest

from urlivo.domain.tlds import TldTable
from urlivo.url.parser import URLParser


@pytest.fixture
def tlds() -> TldTable:
    """Fixture providing a small, fixed TLD table."""
    return TldTable(["com", "org", "net", "uk", "co.uk", "jp", "co.jp", "рф"])


@pytest.fixture
def parser(tlds: TldTable) -> URLParser:
    """Fixture providing a parser bound to the small TLD table."""
    return URLParser(tlds=tlds)
