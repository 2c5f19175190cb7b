"""
Text normalizer for the tweet index.
Turns raw record text into a deduplicated, ordered list of types:
preprocess -> tokenize -> normalize -> collect types.
Hashtags are expanded to the tag with and without the leading '#'.
"""

import re
import warnings
from typing import Callable, Iterable, Sequence

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.stem import PorterStemmer

_STEMMER = PorterStemmer()

# Literal line/tab markers of the export format, and anything that is not a
# word character or '#'
_UNWANTED = re.compile(r"\[NEWLINE\]|\[TAB\]|[^\w#]")

HASHTAG = "#"


def markup_to_text(text: str) -> str:
    """
    Reduce HTML markup and entities (e.g. "&amp;") to visible text.
    """
    if not text:
        return text
    soup = BeautifulSoup(text, "lxml")
    return soup.get_text(separator=" ")


def preprocess(text: str) -> str:
    """
    Replace [NEWLINE]/[TAB] markers and every character that is not a letter,
    digit or '#' with a space. Empty input is returned unchanged.
    """
    if not text:
        return text
    return _UNWANTED.sub(" ", text)


def tokenize(text: str) -> list[str]:
    """Split on ' ' and drop empty tokens."""
    if not text:
        return []
    return [t for t in text.split(" ") if t]


def lowercase(token: str) -> str:
    return token.lower()


def stem(token: str) -> str:
    """Porter stem of a token. Hashtags keep their '#'."""
    if token.startswith(HASHTAG):
        return HASHTAG + _STEMMER.stem(token[1:])
    return _STEMMER.stem(token)


DEFAULT_RULES: tuple[Callable[[str], str], ...] = (lowercase,)


def normalize(
    tokens: Iterable[str],
    rules: Sequence[Callable[[str], str]] = DEFAULT_RULES,
) -> list[str]:
    """
    Apply normalization rules, in order, to every token.
    """
    normalized = []
    for token in tokens:
        for rule in rules:
            token = rule(token)
        normalized.append(token)
    return normalized


def collect_types(tokens: Iterable[str]) -> list[str]:
    """
    Collapse the tokens of one document to its unique types, first-seen order.

    A hashtag adds both "#tag" and "tag", unless "tag" was already collected,
    in which case only "#tag" is added.
    """
    types: list[str] = []
    seen: set[str] = set()

    def add(t: str) -> None:
        types.append(t)
        seen.add(t)

    for token in tokens:
        if token in seen:
            continue
        add(token)
        if token.startswith(HASHTAG):
            bare = token.replace(HASHTAG, "", 1)
            if bare not in seen:
                add(bare)
    return types


def extract_types(
    text: str | None,
    rules: Sequence[Callable[[str], str]] = DEFAULT_RULES,
    strip_markup: bool = False,
) -> list[str]:
    """
    Run the full pipeline on one document's text.
    Returns [] when the text is empty, or empty after preprocessing.
    """
    if not text:
        return []
    if strip_markup:
        text = markup_to_text(text)
    preprocessed = preprocess(text)
    if not preprocessed:
        return []
    return collect_types(normalize(tokenize(preprocessed), rules))
