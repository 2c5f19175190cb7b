"""In-memory boolean search over tweets."""

from .config import IndexerConfig
from .postings import DictionaryEntry, DocumentIdTable, InvertedIndex
from .records import Record, read_records
from .index_builder import build_index, build_index_async, build_index_from_file
from .normalizer import extract_types
from .query import InvalidQueryError, query
