import pytest

from tfidf_search.config import MAX_RESULT_DOCUMENT_COUNT
from tfidf_search.documents import Document, DocumentData, DocumentStatus, DocumentStore
from tfidf_search.index import InvertedIndex
from tfidf_search.query import Query
from tfidf_search.ranking import compare_documents, find_all_documents, select_top_documents, sort_documents


def accept_all(document_id, status, rating):
    return True


@pytest.fixture
def corpus():
    index = InvertedIndex()
    store = DocumentStore()
    for document_id, text, rating in [
        (1, "cat dog", 3),
        (2, "cat bird", 5),
        (3, "fish", 1),
    ]:
        index.add_document(document_id, text.split())
        store.add(document_id, DocumentData(rating, DocumentStatus.ACTUAL))
    return index, store


def test_find_all_documents_scores_plus_words(corpus):
    index, store = corpus
    documents = find_all_documents(Query(plus_words={"dog", "cat"}), index, store, accept_all)
    assert [document.id for document in documents] == [1, 2]
    # ln(3/2) * 0.5 for "cat" plus ln(3) * 0.5 for "dog"
    assert documents[0].relevance > documents[1].relevance
    assert documents[0].rating == 3


def test_minus_word_removes_document_regardless_of_predicate(corpus):
    index, store = corpus
    query = Query(plus_words={"cat"}, minus_words={"bird"})
    documents = find_all_documents(query, index, store, accept_all)
    assert [document.id for document in documents] == [1]


def test_unknown_words_contribute_nothing(corpus):
    index, store = corpus
    query = Query(plus_words={"unicorn"}, minus_words={"dragon"})
    assert find_all_documents(query, index, store, accept_all) == []


def test_predicate_filters_before_scoring(corpus):
    index, store = corpus
    documents = find_all_documents(
        Query(plus_words={"cat"}), index, store, lambda document_id, status, rating: rating > 4
    )
    assert [document.id for document in documents] == [2]


def test_near_equal_relevance_sorts_by_rating():
    documents = [
        Document(1, 0.5, 1),
        Document(2, 0.5 + 1e-7, 9),
        Document(3, 0.9, 0),
    ]
    assert [document.id for document in sort_documents(documents)] == [3, 2, 1]


def test_compare_documents():
    assert compare_documents(Document(1, 0.9, 0), Document(2, 0.1, 10)) < 0
    assert compare_documents(Document(1, 0.1, 10), Document(2, 0.9, 0)) > 0
    assert compare_documents(Document(1, 0.5, 2), Document(2, 0.5, 7)) > 0
    assert compare_documents(Document(1, 0.5, 2), Document(2, 0.5, 2)) == 0


def test_select_top_documents_truncates():
    documents = [Document(document_id, document_id / 10, 0) for document_id in range(8)]
    top = select_top_documents(documents)
    assert len(top) == MAX_RESULT_DOCUMENT_COUNT
    assert [document.id for document in top] == [7, 6, 5, 4, 3]
    assert len(select_top_documents(documents, top_k=None)) == 8
