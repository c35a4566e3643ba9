"""Word-list loading.

A word list is a text file with one word per line. Surrounding whitespace is
stripped and blank lines are skipped. `target` is anything with an
`add_words(words)` method: a `WordTrie` or a `Matcher`.
"""
import os
import glob
import logging

_log = logging.getLogger(__name__)


def read_words(path, encoding="utf-8"):
  """Yield the stripped, non-blank lines of `path`."""
  with open(path, "r", encoding=encoding) as f:
    for lineno, line in enumerate(f, 1):
      word = line.strip()
      if not word:
        _log.debug("%s:%d: blank line skipped", path, lineno)
        continue
      yield word


def load_word_file(target, path, encoding="utf-8"):
  """Register every word in `path`; return how many distinct words it held.

  `OSError` and `UnicodeDecodeError` propagate to the caller.
  """
  count = target.add_words(list(read_words(path, encoding)))
  _log.info("loaded %d words from %s", count, path)
  return count


def load_word_dir(target, dir_path, pattern="*.txt", encoding="utf-8"):
  """Register the words of every file in `dir_path` matching `pattern`.

  Files are read in sorted name order. Returns the summed per-file counts.
  """
  if not os.path.isdir(dir_path):
    raise NotADirectoryError(dir_path)
  total = 0
  files = sorted(glob.glob(os.path.join(dir_path, pattern)))
  for path in files:
    total += load_word_file(target, path, encoding)
  if not files:
    _log.warning("no files matching %r in %s", pattern, dir_path)
  return total
