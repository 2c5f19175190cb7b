"""
Index builder: constructs the in-memory inverted index from a stream of records.

Every record gets the next internal document id (0, 1, 2, ...), whether or
not it is indexed. Records with empty text are skipped; their position is a
hole in the id table. Postings get each new id at their head, so they stay
sorted descending without any sorting step.
"""

import logging
import time
from pathlib import Path
from typing import AsyncIterable, Callable, Iterable, Protocol

from .config import IndexerConfig
from .normalizer import collect_types, markup_to_text, normalize, preprocess, tokenize
from .postings import DocumentIdTable, InvertedIndex
from .records import read_records

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, float], None]


class RecordLike(Protocol):
    external_id: str
    text: str | None


class _Builder:
    """Mutable state of one indexing pass."""

    def __init__(self, config: IndexerConfig, on_progress: ProgressCallback | None) -> None:
        self.config = config
        self.rules = config.rules()
        self.on_progress = on_progress
        self.index = InvertedIndex()
        self.ids = DocumentIdTable()
        self.next_doc_id = 0
        self._last_tick = time.monotonic()

    def add(self, record: RecordLike) -> None:
        doc_id = self.next_doc_id
        self.next_doc_id += 1
        self._index_record(doc_id, record)
        self._tick()

    def _index_record(self, doc_id: int, record: RecordLike) -> None:
        text = getattr(record, "text", None)
        if not text:
            logger.debug("Skipping document %d: no text", doc_id)
            return
        if self.config.strip_markup:
            text = markup_to_text(text)
        preprocessed = preprocess(text)
        if not preprocessed:
            logger.debug("Skipping document %d: empty after preprocessing", doc_id)
            return

        types = collect_types(normalize(tokenize(preprocessed), self.rules))
        for term in types:
            self.index.add_posting(term, doc_id)

        self.ids[doc_id] = record.external_id

    def _tick(self) -> None:
        every = self.config.progress_every
        if not every or self.next_doc_id % every:
            return
        now = time.monotonic()
        elapsed_ms = (now - self._last_tick) * 1000.0
        self._last_tick = now
        logger.info("Current speed: %.0fms/%d (%d records)", elapsed_ms, every, self.next_doc_id)
        if self.on_progress is not None:
            self.on_progress(self.next_doc_id, elapsed_ms)

    def result(self) -> tuple[InvertedIndex, DocumentIdTable]:
        logger.info(
            "Indexed %d of %d records, %d terms",
            self.ids.count,
            self.next_doc_id,
            len(self.index),
        )
        return self.index, self.ids


def build_index(
    records: Iterable[RecordLike],
    *,
    config: IndexerConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> tuple[InvertedIndex, DocumentIdTable]:
    """
    Build the dictionary and id table from a finite, single-pass record source.
    Never fails on records with missing or empty text; they are skipped.
    Returns (index, ids).
    """
    builder = _Builder(config or IndexerConfig(), on_progress)
    for record in records:
        builder.add(record)
    return builder.result()


async def build_index_async(
    records: AsyncIterable[RecordLike],
    *,
    config: IndexerConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> tuple[InvertedIndex, DocumentIdTable]:
    """
    Same as build_index over an async record source. Pulling the next record
    is the only await; the index is mutated by this coroutine alone.
    """
    builder = _Builder(config or IndexerConfig(), on_progress)
    async for record in records:
        builder.add(record)
    return builder.result()


def build_index_from_file(
    path: Path,
    *,
    config: IndexerConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> tuple[InvertedIndex, DocumentIdTable]:
    """
    Read records from a separator-delimited file and build the index.
    Raises FileNotFoundError if the file does not exist.
    """
    config = config or IndexerConfig()
    records = read_records(
        path,
        separator=config.separator,
        encoding=config.encoding,
        errors=config.errors,
    )
    return build_index(records, config=config, on_progress=on_progress)
