"""
Dictionary and postings data structures.

A dictionary entry holds a term, its document frequency and its postings
list. Postings are kept newest-first: documents arrive in increasing id
order and every new id goes to the head, so each list is strictly
descending by internal document id.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class DictionaryEntry:
    """
    One term of the dictionary.
    - term: normalized type string
    - document_frequency: number of distinct documents containing the term
    - _ids: internal document ids in indexing order (read reversed)
    """

    term: str
    document_frequency: int = 0
    _ids: list[int] = field(default_factory=list, repr=False)

    def prepend(self, doc_id: int) -> None:
        """Put doc_id at the head of the postings and count it (no duplicate check)."""
        self._ids.append(doc_id)
        self.document_frequency += 1

    @property
    def head(self) -> int | None:
        """Newest (largest) document id, or None for an empty list."""
        return self._ids[-1] if self._ids else None

    def postings(self) -> list[int]:
        """Document ids, head to tail (descending)."""
        return self._ids[::-1]

    def __iter__(self) -> Iterator[int]:
        return reversed(self._ids)

    def __len__(self) -> int:
        return len(self._ids)


class InvertedIndex:
    """
    The dictionary: map from term -> DictionaryEntry.
    Head insertion only; entries are never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, DictionaryEntry] = {}

    def add_posting(self, term: str, doc_id: int) -> DictionaryEntry:
        """
        Record that document doc_id contains term. Creates the entry on the
        term's first occurrence. doc_id must be larger than any id already
        added for this term.
        """
        entry = self._entries.get(term)
        if entry is None:
            entry = DictionaryEntry(term=term)
            self._entries[term] = entry
        entry.prepend(doc_id)
        return entry

    def get(self, term: str) -> DictionaryEntry | None:
        return self._entries.get(term)

    def get_postings(self, term: str) -> list[int]:
        """Return the descending postings for a term, or empty list."""
        entry = self._entries.get(term)
        return entry.postings() if entry is not None else []

    def document_frequency(self, term: str) -> int:
        entry = self._entries.get(term)
        return entry.document_frequency if entry is not None else 0

    def terms(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, term: str) -> bool:
        return term in self._entries

    def to_dict(self) -> dict:
        """Plain dict view: term -> {"df": int, "postings": [ids...]}."""
        return {
            term: {"df": entry.document_frequency, "postings": entry.postings()}
            for term, entry in self._entries.items()
        }


# Position of a skipped record
_HOLE = object()


class DocumentIdTable:
    """
    Sparse map from internal document id -> external id.

    Positions of skipped records are holes: they are not "in" the table and
    raise KeyError when looked up. External ids are stored as given.
    """

    def __init__(self) -> None:
        self._ids: list = []
        self._count = 0

    def __setitem__(self, doc_id: int, external_id: str) -> None:
        if doc_id < 0:
            raise ValueError(f"negative document id: {doc_id}")
        if doc_id >= len(self._ids):
            self._ids.extend([_HOLE] * (doc_id + 1 - len(self._ids)))
        if self._ids[doc_id] is _HOLE:
            self._count += 1
        self._ids[doc_id] = external_id

    def __getitem__(self, doc_id: int) -> str:
        if doc_id not in self:
            raise KeyError(doc_id)
        return self._ids[doc_id]

    def get(self, doc_id: int, default: str | None = None) -> str | None:
        try:
            return self[doc_id]
        except KeyError:
            return default

    def __contains__(self, doc_id: object) -> bool:
        return (
            isinstance(doc_id, int)
            and 0 <= doc_id < len(self._ids)
            and self._ids[doc_id] is not _HOLE
        )

    def __len__(self) -> int:
        """Length of the underlying array (highest indexed id + 1), holes included."""
        return len(self._ids)

    @property
    def count(self) -> int:
        """Number of indexed documents."""
        return self._count

    def resolve(self, doc_ids: list[int]) -> list[str]:
        """Map internal ids to external ids."""
        return [self[d] for d in doc_ids]

    def to_list(self) -> list[str | None]:
        """Array view, None at holes."""
        return [None if i is _HOLE else i for i in self._ids]
