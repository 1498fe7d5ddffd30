# markov_quotes/text/tokenizer.py
# whitespace tokenizer and corpus line classification

import re
from enum import Enum
from typing import List, Tuple

# space, tab, carriage return, newline
_split_re = re.compile(r"[ \t\r\n]+")

DEFAULT_SKIP_MARKER = "-"


class LineKind(Enum):
    BLANK = "blank"  # no tokens, ends the current passage
    SKIP = "skip"  # metadata/separator line, ignored entirely
    TEXT = "text"


def simple_tokenize(s: str) -> List[str]:
    """
    Split a line into words on space, tab, \\r and \\n only.
    Punctuation stays attached to its word; the generator relies on it.
    """
    if not s:
        return []
    return [t for t in _split_re.split(s) if t]


def classify_line(line: str, skip_marker: str = DEFAULT_SKIP_MARKER) -> Tuple[LineKind, List[str]]:
    toks = simple_tokenize(line)
    if not toks:
        return LineKind.BLANK, toks
    if skip_marker and toks[0].startswith(skip_marker):
        return LineKind.SKIP, toks
    return LineKind.TEXT, toks
