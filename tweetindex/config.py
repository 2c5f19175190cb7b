"""
Indexer configuration.

Replaces global separator / path constants with an explicit object passed to
the indexer's entry points. CLI flags override the defaults field by field.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .normalizer import DEFAULT_RULES, stem

# Field separator of the record files (tab separated values)
SEPARATOR = "\t"

# Emit a progress signal every N records seen
DEFAULT_PROGRESS_EVERY = 100_000

# Decoding of malformed bytes in record files (see open(errors=...))
DECODE_ERRORS = "replace"

DEFAULT_DATA_PATH = Path("data") / "twitter.csv"


def default_data_path() -> Path:
    """Default tweet file, relative to the current working directory."""
    return Path.cwd() / DEFAULT_DATA_PATH


@dataclass
class IndexerConfig:
    """
    Settings for reading records and building the index.
    - separator: column separator of the record file
    - encoding: text encoding of the record file
    - errors: how undecodable bytes are handled ("replace" keeps the line)
    - progress_every: records between progress signals (0 disables them)
    - stem: add Porter stemming after lowercasing
    - strip_markup: reduce HTML markup/entities to visible text before preprocessing
    """

    separator: str = SEPARATOR
    encoding: str = "utf-8"
    errors: str = DECODE_ERRORS
    progress_every: int = DEFAULT_PROGRESS_EVERY
    stem: bool = False
    strip_markup: bool = False

    def rules(self) -> list[Callable[[str], str]]:
        """Normalization rules implied by this config."""
        rules = list(DEFAULT_RULES)
        if self.stem:
            rules.append(stem)
        return rules
