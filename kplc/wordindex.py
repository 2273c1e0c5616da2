"""Word index: lists each word of a text with its count and line numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from operator import attrgetter

DEFAULT_STOPWORDS_FILE = "stopw.txt"
DEFAULT_TEXT_FILE = "vanban.txt"


@dataclass
class IndexEntry:
    """A word, how often it was indexed, and the distinct lines it appeared on."""

    word: str
    count: int = 0
    lines: list[int] = field(default_factory=list)

    def add(self, line: int) -> None:
        """Record one more occurrence on ``line``."""
        self.count += 1
        if not self.lines or self.lines[-1] != line:
            self.lines.append(line)


def load_stopwords(text: str) -> frozenset[str]:
    """Return the whitespace-separated words of ``text``."""
    return frozenset(text.split())


def _is_alpha(ch: str | None) -> bool:
    return ch is not None and ch.isascii() and ch.isalpha()


def _runs(text: str) -> Iterator[tuple[str, int, str | None]]:
    """Yield (letters, line, terminator) for each run of letters.

    The terminator is the non-letter character that ended the run, or None
    at the end of the text; runs may be empty.
    """
    chars = iter(text)
    line = 1
    while True:
        start_line = line
        letters = []
        ch = next(chars, None)
        while _is_alpha(ch):
            letters.append(ch)
            ch = next(chars, None)
        if ch == "\n":
            line += 1
        yield "".join(letters), start_line, ch
        if ch is None:
            return


def build_index(text: str, stopwords: Iterable[str]) -> list[IndexEntry]:
    """Index the words of ``text`` in alphabetical order.

    Words are lower-cased. Stop words are skipped, and so are capitalised
    words that do not start a sentence, which are taken to be proper names.
    """
    stops = frozenset(stopwords)
    entries: dict[str, IndexEntry] = {}
    sentence_start = True
    for raw, line, terminator in _runs(text):
        word = raw.lower()
        capitalised = bool(raw) and raw[0].isupper()
        if word and word not in stops and (sentence_start or not capitalised):
            entries.setdefault(word, IndexEntry(word)).add(line)
            sentence_start = False
        if terminator == ".":
            sentence_start = True
    return sorted(entries.values(), key=attrgetter("word"))


def format_index(entries: Iterable[IndexEntry]) -> str:
    """Render entries as 'word count, line, line' lines."""
    return "".join(
        f"{entry.word} {entry.count}, {', '.join(map(str, entry.lines))}\n"
        for entry in entries
    )


def _read(path: str) -> str:
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Print the index of a text file, given stop-word and text file paths."""
    args = sys.argv[1:] if argv is None else argv
    stop_path = args[0] if len(args) > 0 else DEFAULT_STOPWORDS_FILE
    text_path = args[1] if len(args) > 1 else DEFAULT_TEXT_FILE
    try:
        stopwords = load_stopwords(_read(stop_path))
    except OSError:
        stopwords = frozenset()
    try:
        text = _read(text_path)
    except OSError:
        print(f"Can't read input file {text_path}!", file=sys.stderr)
        return 1
    sys.stdout.write(format_index(build_index(text, stopwords)))
    return 0


if __name__ == "__main__":
    sys.exit(main())