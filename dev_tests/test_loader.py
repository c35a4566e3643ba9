import os
import sys
import tempfile
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from wordfilter.config import FilterConfig
from wordfilter.loader import load_word_dir, load_word_file, read_words
from wordfilter.matcher import Matcher
from wordfilter.word_trie import WordTrie


def write(path, text):
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


class LoaderTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name
        self.words_file = os.path.join(self.dir, "word.txt")
        write(self.words_file, "sb\n  TMD  \n\n   \n他妈的\nsb\n")

    def tearDown(self):
        self._tmp.cleanup()


class TestReadWords(LoaderTestCase):
    def test_strips_and_skips_blank_lines(self):
        self.assertEqual(list(read_words(self.words_file)), ["sb", "TMD", "他妈的", "sb"])

    def test_missing_file_raises(self):
        with self.assertRaises(OSError):
            list(read_words(os.path.join(self.dir, "nope.txt")))


class TestLoadWordFile(LoaderTestCase):
    def test_into_trie(self):
        t = WordTrie()
        self.assertEqual(load_word_file(t, self.words_file), 3)
        self.assertEqual(sorted(t.words()), sorted(["sb", "TMD", "他妈的"]))
        self.assertFalse(t.root.is_terminal)

    def test_into_matcher(self):
        m = Matcher()
        load_word_file(m, self.words_file)
        self.assertEqual(m.censor("sb2~~TMD， 他妈的"), "**2~~***， ***")


class TestLoadWordDir(LoaderTestCase):
    def test_reads_every_txt(self):
        write(os.path.join(self.dir, "extra.txt"), "傻\n")
        write(os.path.join(self.dir, "ignored.csv"), "csv\n")
        t = WordTrie()
        self.assertEqual(load_word_dir(t, self.dir), 4)
        self.assertIn("傻", t)
        self.assertNotIn("csv", t)

    def test_not_a_directory(self):
        with self.assertRaises(NotADirectoryError):
            load_word_dir(WordTrie(), self.words_file)

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as empty:
            self.assertEqual(load_word_dir(WordTrie(), empty), 0)


class TestFromConfig(LoaderTestCase):
    def test_files_and_dirs(self):
        sub = os.path.join(self.dir, "lists")
        os.mkdir(sub)
        write(os.path.join(sub, "a.txt"), "傻\n")
        m = Matcher.from_config(FilterConfig(replace_char="#",
                                             word_files=[self.words_file],
                                             word_dirs=[sub]))
        self.assertTrue(m.published)
        self.assertEqual(len(m), 4)
        self.assertEqual(m.censor("傻 sb"), "# ##")

    def test_unpublished(self):
        m = Matcher.from_word_file(self.words_file, publish=False)
        m.add_word("extra")
        self.assertTrue(m.contains("extra"))

    def test_from_word_file(self):
        m = Matcher.from_word_file(self.words_file)
        self.assertTrue(m.published)
        self.assertEqual(m.censor("sb"), "**")


class TestFilterConfig(unittest.TestCase):
    def test_defaults(self):
        c = FilterConfig()
        self.assertEqual(c.replace_char, "*")
        self.assertEqual(c.word_files, [])
        self.assertEqual(c.word_dirs, [])
        self.assertTrue(c.publish)

    def test_none_sources(self):
        c = FilterConfig(word_files=None, word_dirs=None)
        self.assertEqual(c.word_files, [])
        self.assertEqual(c.word_dirs, [])

    def test_invalid(self):
        with self.assertRaises(ValueError):
            FilterConfig(replace_char="**")
        with self.assertRaises(ValueError):
            FilterConfig(replace_char="")
        with self.assertRaises(ValueError):
            FilterConfig(encoding="")


if __name__ == "__main__":
    unittest.main(verbosity=2)
