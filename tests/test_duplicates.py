import logging

from tfidf_search.documents import DocumentStatus
from tfidf_search.duplicates import find_duplicates, remove_duplicates
from tfidf_search.search_server import SearchServer


def make_server():
    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same as 2
    server.add_document(3, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # differs from 2 only in stop words
    server.add_document(4, "funny pet and curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same word set as 1
    server.add_document(5, "funny funny pet and nasty nasty rat", DocumentStatus.ACTUAL, [1, 2])
    # new words
    server.add_document(6, "funny pet and not very nasty rat", DocumentStatus.ACTUAL, [1, 2])
    # same word set as 6, different order
    server.add_document(7, "very nasty rat and not very funny pet", DocumentStatus.ACTUAL, [1, 2])
    # subset of words
    server.add_document(8, "pet with rat and rat and rat", DocumentStatus.ACTUAL, [1, 2])
    # words from different documents
    server.add_document(9, "nasty rat with curly hair", DocumentStatus.ACTUAL, [1, 2])
    return server


def test_find_duplicates():
    assert find_duplicates(make_server()) == [3, 4, 5, 7]


def test_remove_duplicates(caplog):
    server = make_server()
    with caplog.at_level(logging.INFO, logger="tfidf_search"):
        removed = remove_duplicates(server)

    assert removed == [3, 4, 5, 7]
    assert list(server) == [1, 2, 6, 8, 9]
    assert server.document_count() == 5
    assert [record.getMessage() for record in caplog.records if record.levelno == logging.INFO] == [
        "Found duplicate document id 3",
        "Found duplicate document id 4",
        "Found duplicate document id 5",
        "Found duplicate document id 7",
    ]


def test_no_duplicates():
    server = SearchServer()
    server.add_document(1, "cat", DocumentStatus.ACTUAL, [])
    server.add_document(2, "dog", DocumentStatus.ACTUAL, [])
    assert remove_duplicates(server) == []
    assert list(server) == [1, 2]
