"""
Record source: reads tweets from a delimiter-separated file, one per line.

Columns: tweet id, user id, user name, tweet text. Only the id and the text
matter to the index.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .config import DECODE_ERRORS, SEPARATOR


@dataclass
class Record:
    external_id: str
    text: str | None = None
    user_id: str | None = None
    user_name: str | None = None


def parse_record(line: str, separator: str = SEPARATOR) -> Record:
    """
    Split one line into a Record. Missing columns are None, so a line
    without a text column yields a record the indexer skips.
    """
    fields = line.split(separator)
    fields += [None] * (4 - len(fields))
    external_id, user_id, user_name, text = fields[:4]
    return Record(
        external_id=external_id,
        text=text,
        user_id=user_id,
        user_name=user_name,
    )


def read_records(
    path: Path,
    *,
    separator: str = SEPARATOR,
    encoding: str = "utf-8",
    errors: str = DECODE_ERRORS,
) -> Iterator[Record]:
    """
    Lazily yield one Record per line of the file. Only the line break is
    stripped. '\\r\\n' counts as a single line break. Undecodable bytes are
    handled per `errors` (replaced with U+FFFD by default).
    Raises FileNotFoundError right away if the path is not a file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Record file not found: {path}")
    return _iter_lines(path, separator, encoding, errors)


def _iter_lines(path: Path, separator: str, encoding: str, errors: str) -> Iterator[Record]:
    with open(path, "r", encoding=encoding, errors=errors, newline=None) as f:
        for line in f:
            yield parse_record(line.rstrip("\n"), separator)
