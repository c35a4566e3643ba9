from typing import List, Optional
from dataclasses import dataclass, field

DEFAULT_REPLACE_CHAR = "*"

## === Config Class === ##

@dataclass
class FilterConfig:
    """
    Configuration for Matcher.from_config
        replace_char: str, single code point written over every matched code point
        word_files: list, word-list files, one word per line
        word_dirs: list, directories whose *.txt files are word lists
        encoding: str, text encoding of the word lists
        publish: bool, freeze the trie once every source is loaded
    """
    replace_char: str = DEFAULT_REPLACE_CHAR
    word_files: Optional[List[str]] = field(default_factory=list)
    word_dirs: Optional[List[str]] = field(default_factory=list)
    encoding: str = "utf-8"
    publish: bool = True

    def __post_init__(self):
        if not isinstance(self.replace_char, str) or len(self.replace_char) != 1:
            raise ValueError(f"replace_char must be a single character, got {self.replace_char!r}")
        if not self.encoding:
            raise ValueError("encoding must be a non-empty string")
        # None means "no sources"
        self.word_files = list(self.word_files or [])
        self.word_dirs = list(self.word_dirs or [])
