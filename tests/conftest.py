import pytest

from tfidf_search.documents import DocumentStatus
from tfidf_search.search_server import SearchServer


@pytest.fixture
def server():
    """Seven documents with mixed statuses; no stop words."""
    server = SearchServer()
    server.add_document(0, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "groomed starling evgeny", DocumentStatus.ACTUAL, [9])
    server.add_document(4, "not particularly groomed dog arseny", DocumentStatus.ACTUAL, [8])
    server.add_document(5, "black starling and fancy collar", DocumentStatus.BANNED, [8, 1, 5])
    server.add_document(6, "starling and collar", DocumentStatus.IRRELEVANT, [9, 5, 2])
    return server
