"""
Query engine: boolean AND over the in-memory index.

Postings are sorted descending by internal document id, so intersection is a
two-pointer merge walking both lists from the head. Lists are merged
smallest first, and the merge stops as soon as the running result is empty.
"""

from typing import Sequence

from .postings import DocumentIdTable, InvertedIndex


class InvalidQueryError(ValueError):
    """Raised for a query without any terms."""


def intersect(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Intersect two postings lists sorted descending by doc id.
    Returns the common ids, descending.
    """
    result: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        d1 = a[i]
        d2 = b[j]
        if d1 == d2:
            result.append(d1)
            i += 1
            j += 1
        elif d1 > d2:
            i += 1
        else:
            j += 1
    return result


def match(index: InvertedIndex, *terms: str) -> list[int]:
    """
    Internal document ids matching all terms, descending.
    Terms are looked up as given; a term not in the index matches nothing.
    """
    if not terms:
        raise InvalidQueryError("query needs at least one term")

    if len(terms) == 1:
        return index.get_postings(terms[0])

    # Smallest lists first
    by_frequency = sorted(terms, key=index.document_frequency)
    postings_lists = [index.get_postings(term) for term in by_frequency]
    result = postings_lists[0]
    for other in postings_lists[1:]:
        if not result:
            break
        result = intersect(result, other)
    return result


def query(index: InvertedIndex, ids: DocumentIdTable, *terms: str) -> list[str]:
    """
    Return the external ids of documents containing every term, ordered
    descending by internal id (most recently indexed first).
    """
    return ids.resolve(match(index, *terms))
