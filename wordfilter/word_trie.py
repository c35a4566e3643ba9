"""
Sensitive-word Trie (code-point-per-edge) with lazy children and batch loading.

This module holds the prefix tree the matcher walks while scanning text.
Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts
  (`children=None` until the first child is added).
- **Code points, not bytes:** edges are keyed by single characters of a Python
  `str`, so multi-byte characters (CJK, emoji) are one edge each.
- **Exact text:** no case folding or normalization is applied. The terminal
  node keeps the word exactly as registered in `matched_text`.
- **Batch performance:** `add_words` exploits the Longest Common Prefix (LCP)
  between *adjacent, sorted* inputs to minimize retraversal.
- **Build, then freeze:** after `freeze()` the trie is read-only and may be
  shared by any number of concurrent readers.


Classes
-------
TrieNode
    Minimal node holding `children`, `is_terminal` and `matched_text`.
WordTrie
    Public API for registration, lookup, export and structural stats.


Complexity (typical)
--------------------
- single insert / lookup: O(L)
- batch insert (sorted): ~O(total new characters created)
- export: O(#nodes)


Conventions & Notes
-------------------
- **Children:** `children` is `None` for leaves. Always guard with
  `if node.children: ...`.
- **Empty string:** registering `""` would mark the root terminal and make every
  scan report a zero-length match, so it is rejected with `ValueError`.
    """
import logging

_log = logging.getLogger(__name__)


class TrieNode:
  __slots__ = ("children", "is_terminal", "matched_text")

  def __init__(self):
    self.children = None
    self.is_terminal = False
    self.matched_text = None

  def __repr__(self):
    n = len(self.children) if self.children else 0
    return f"TrieNode(children={n}, is_terminal={self.is_terminal}, matched_text={self.matched_text!r})"


def _check_word(word):
  if not isinstance(word, str):
    raise TypeError(f"word must be str, not {type(word).__name__}")
  if not word:
    raise ValueError("cannot register an empty word")
  return word


class WordTrie:
  __slots__ = ("root", "frozen", "_size")

  def __init__(self):
    self.root = TrieNode()
    self.frozen = False
    self._size = 0

  def __len__(self):
    return self._size

  def __contains__(self, word):
    return isinstance(word, str) and self.search(word) is not None

  def _check_mutable(self):
    if self.frozen:
      raise RuntimeError("trie is frozen; words can only be added before publishing")

  def _mark(self, node, word):
    if not node.is_terminal:
      self._size += 1
    node.is_terminal = True
    node.matched_text = word

  def _prepare_batch(self, words, dedup=True, presorted=False):
    """Validate, and optionally sort/deduplicate, a batch of words.

    Parameters
    ----------
    words : Iterable[str]
        Incoming words to process.
    dedup : bool, default=True
        Remove duplicates within the batch.
    presorted : bool, default=False
        If True, `words` is already sorted. When True + dedup, we do a stable
        O(n) pass to remove duplicates.

    Returns
    -------
    list[str]
        Words ready for `add_words`.

    Raises
    ------
    TypeError
        If an element is not a `str`.
    ValueError
        If an element is the empty string.
    """
    items = (_check_word(w) for w in words)

    if not presorted:
      return sorted(set(items)) if dedup else sorted(items)

    if dedup:
      unique = []
      last = None
      for w in items:
        if w != last:
          unique.append(w)
          last = w
      return unique
    return list(items)


  def add_word(self, word):
    """Register a single word.

    Parameters
    ----------
    word : str
        Word to insert, used verbatim.

    Notes
    -----
    - Lazily creates the `children` dict only when a node gets its first child.
    - Marks the end node terminal and stores `word` on it. Re-adding a word
      creates no nodes.

    Raises
    ------
    TypeError, ValueError
        For a non-string or empty word.
    RuntimeError
        If the trie has been frozen.
    """
    self._check_mutable()
    word = _check_word(word)
    node = self.root

    for ch in word:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
            node.children = {ch: nxt}
        else:
            children[ch] = nxt
      node = nxt
    self._mark(node, word)


  def add_words(self,
                words,
                *,
                dedup=True,
                presorted=False):
    """Bulk-register many words using LCP reuse.

    Parameters
    ----------
    words : Iterable[str]
        Words to insert.
    dedup, presorted
        See `_prepare_batch`.

    Returns
    -------
    int
        Number of words walked (after deduplication).

    Notes
    -----
    - The whole batch is validated before any node is created, so a bad
      element leaves the trie untouched.
    - Iterates words in sorted order and reuses the Longest Common Prefix with
      the previous word to avoid retraversing from the root.
    """
    self._check_mutable()
    words = self._prepare_batch(words, dedup, presorted)

    prev = ''
    path = [self.root]

    for w in words:
      lp, lw = len(prev), len(w)
      i = 0
      while i < lp and i < lw and prev[i] == w[i]:
        i += 1

      path = path[:i + 1]
      node = path[-1]

      for ch in w[i:]:
        children = node.children
        nxt = None if children is None else children.get(ch)

        if nxt is None:
          nxt = TrieNode()
          if children is None:
              node.children = {ch: nxt}
          else:
              children[ch] = nxt

        path.append(nxt)
        node = nxt

      self._mark(node, w)
      prev = w
    return len(words)


  def freeze(self):
    """Mark the trie read-only. Idempotent."""
    if not self.frozen:
      self.frozen = True
      _log.info("word trie frozen with %d words", self._size)


  @staticmethod
  def find_child(node, ch):
    """Return the child of `node` on edge `ch`, or None."""
    children = node.children
    return None if children is None else children.get(ch)


  def find_node(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing.

    The returned node may or may not be terminal.
    """
    node = self.root
    for ch in prefix:
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node


  def search(self, word):
    """Return the terminal node for `word` if registered, else None.
    """
    node = self.find_node(word)
    return node if node and node.is_terminal else None


  def words(self):
    """Yield every registered word using an iterative DFS.

    Order follows child insertion order; sort the result if you need
    lexicographic output.
    """
    stack = [self.root]
    while stack:
      node = stack.pop()
      if node.is_terminal:
        yield node.matched_text
      if node.children:
        stack.extend(reversed(list(node.children.values())))


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only:
        `sum(len(children)) / (# internal nodes)`.

    Returns
    -------
    int | float
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
