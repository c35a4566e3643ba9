"""
Sensitive-word matcher: scan, containment check and censoring over a WordTrie.

The scan walks the trie over a list of code points (one-character strings).
When a partial match breaks, one of two things happens:
- the last node reached is terminal: the match is confirmed and ends at the
  current position (exclusive);
- otherwise the partial match was a dead end and scanning restarts one code
  point after where it began, from the root.

There are no failure links. Restarting re-examines the code points inside the
failed candidate, so a word starting there is still found. A terminal passed
*earlier* on a longer path that later breaks is not remembered; only the node
where the walk stopped decides.

A match still open when the input runs out is confirmed only if the final node
is terminal. A non-terminal prefix at end of input is no match.

Public API
----------
- `Matcher.scan(chars, start=0, replace=False, replace_char=None)`
    One pass from `start`; returns `(found, end)`. Out-of-range `start` gives
    `(False, -1)`.
- `Matcher.contains(text)`
    True if any registered word occurs in `text`.
- `Matcher.censor(text)`
    Copy of `text` with every match overwritten, one replacement character per
    matched code point. Returns `text` itself when nothing matched.
- `Matcher.iter_matches(text)`
    Yields `Match(start, end, word)` for the spans `censor` would replace.

Once built, publish the matcher (`publish()`) before sharing it across
threads; readers never mutate the trie.
"""
import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from wordfilter.config import DEFAULT_REPLACE_CHAR, FilterConfig
from wordfilter.loader import load_word_dir, load_word_file
from wordfilter.word_trie import WordTrie

_log = logging.getLogger(__name__)


class Match(NamedTuple):
    start: int
    end: int
    word: str


def _check_replace_char(ch):
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"replace_char must be a single character, got {ch!r}")
    return ch


class Matcher:
    def __init__(self, words=None, replace_char: str = DEFAULT_REPLACE_CHAR,
                 trie: Optional[WordTrie] = None) -> None:
        self.replace_char = _check_replace_char(replace_char)
        self.trie = trie if trie is not None else WordTrie()
        if words is not None:
            self.add_words(words)

    @classmethod
    def from_config(cls, config: FilterConfig) -> "Matcher":
        """Build a matcher and load every word source named in `config`."""
        matcher = cls(replace_char=config.replace_char)
        for path in config.word_files:
            load_word_file(matcher, path, config.encoding)
        for dir_path in config.word_dirs:
            load_word_dir(matcher, dir_path, encoding=config.encoding)
        if config.publish:
            matcher.publish()
        return matcher

    @classmethod
    def from_word_file(cls, path, replace_char: str = DEFAULT_REPLACE_CHAR,
                       encoding: str = "utf-8", publish: bool = True) -> "Matcher":
        return cls.from_config(FilterConfig(replace_char=replace_char,
                                            word_files=[path],
                                            encoding=encoding,
                                            publish=publish))

    def __len__(self) -> int:
        return len(self.trie)

    def __repr__(self) -> str:
        return f"Matcher(words={len(self.trie)}, replace_char={self.replace_char!r}, published={self.published})"

    @property
    def published(self) -> bool:
        return self.trie.frozen

    def add_word(self, word: str) -> None:
        self.trie.add_word(word)

    def add_words(self, words) -> int:
        return self.trie.add_words(words)

    def publish(self) -> "Matcher":
        """Freeze the trie; the matcher is read-only from here on."""
        self.trie.freeze()
        return self

    # ------------------------------------------------------------------
    # scanning
    # ------------------------------------------------------------------
    def _scan(self, chars: List[str], start: int):
        """Locate the next match at or after `start`.

        Returns `(match_start, end, terminal_node)` or None.
        """
        root = self.trie.root if self.trie is not None else None
        n = len(chars)
        if root is None or start < 0 or start >= n:
            return None

        find_child = WordTrie.find_child
        node = root
        match_start = -1
        i = start

        while i < n:
            nxt = find_child(node, chars[i])
            if nxt is not None:
                if match_start == -1:
                    match_start = i
                node = nxt
                i += 1
            elif match_start == -1:
                i += 1
            elif node.is_terminal:
                return match_start, i, node
            else:
                # dead end: retry from the code point after the candidate's start
                i = match_start + 1
                node = root
                match_start = -1

        if match_start != -1 and node.is_terminal:
            return match_start, n, node
        return None

    def scan(self, chars: List[str], start: int = 0, replace: bool = False,
             replace_char: Optional[str] = None) -> Tuple[bool, int]:
        """Run one scan over `chars` beginning at `start`.

        Parameters
        ----------
        chars : list[str]
            Code points of the text, e.g. `list(text)`. Mutated in place when
            `replace` is true and a match is found.
        start : int
            Offset to scan from.
        replace : bool
            Overwrite the matched span.
        replace_char : str | None
            Overrides the matcher's replacement character for this call.

        Returns
        -------
        tuple[bool, int]
            `(True, end)` with `end` exclusive, or `(False, -1)`.
        """
        hit = self._scan(chars, start)
        if hit is None:
            return False, -1
        match_start, end, _ = hit
        if replace:
            ch = self.replace_char if replace_char is None else _check_replace_char(replace_char)
            chars[match_start:end] = [ch] * (end - match_start)
        return True, end

    def contains(self, text: str) -> bool:
        if not text:
            return False
        found, _ = self.scan(list(text), 0)
        return found

    def censor(self, text: str) -> str:
        if not text:
            return text
        chars = list(text)
        found, end = True, 0
        count = 0
        while found:
            found, end = self.scan(chars, end, replace=True)
            if found:
                count += 1
        if count == 0:
            return text
        _log.debug("censored %d matches in %d code points", count, len(chars))
        return "".join(chars)

    def iter_matches(self, text: str) -> Iterator[Match]:
        chars = list(text)
        end = 0
        while True:
            hit = self._scan(chars, end)
            if hit is None:
                return
            start, end, node = hit
            yield Match(start, end, node.matched_text)
