import pytest

from tweetindex.postings import DocumentIdTable, InvertedIndex


def test_postings_read_newest_first():
    index = InvertedIndex()
    for doc_id in (0, 1, 2):
        index.add_posting("covid", doc_id)
    entry = index.get("covid")
    assert entry.postings() == [2, 1, 0]
    assert list(entry) == [2, 1, 0]
    assert entry.head == 2
    assert entry.document_frequency == 3 == len(entry)


def test_one_entry_per_term():
    index = InvertedIndex()
    index.add_posting("a", 0)
    index.add_posting("b", 0)
    index.add_posting("a", 4)
    assert len(index) == 2
    assert sorted(index.terms()) == ["a", "b"]
    assert index.to_dict() == {
        "a": {"df": 2, "postings": [4, 0]},
        "b": {"df": 1, "postings": [0]},
    }


def test_unknown_term():
    index = InvertedIndex()
    assert "nope" not in index
    assert index.get("nope") is None
    assert index.get_postings("nope") == []
    assert index.document_frequency("nope") == 0


def test_get_postings_returns_a_copy():
    index = InvertedIndex()
    index.add_posting("a", 0)
    index.get_postings("a").append(99)
    assert index.get_postings("a") == [0]


def test_id_table_holes():
    ids = DocumentIdTable()
    ids[1] = "t1"
    ids[3] = "t3"
    assert len(ids) == 4
    assert ids.count == 2
    assert 0 not in ids
    assert 1 in ids
    assert ids[3] == "t3"
    assert ids.get(2) is None
    assert ids.to_list() == [None, "t1", None, "t3"]
    with pytest.raises(KeyError):
        ids[0]
    with pytest.raises(KeyError):
        ids[10]


def test_id_table_resolve():
    ids = DocumentIdTable()
    ids[0] = "a"
    ids[2] = "c"
    assert ids.resolve([2, 0]) == ["c", "a"]


def test_id_table_rejects_negative_ids():
    ids = DocumentIdTable()
    with pytest.raises(ValueError):
        ids[-1] = "x"


def test_id_table_stores_none_external_id():
    ids = DocumentIdTable()
    ids[1] = None
    ids[1] = None
    assert 1 in ids
    assert 0 not in ids
    assert ids[1] is None
    assert ids.count == 1
    assert ids.get(1, "missing") is None
    assert ids.get(0, "missing") == "missing"
