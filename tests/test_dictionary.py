import tempfile
import threading
import unittest
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import MagicMock

import requests

from boggle.core.exceptions import DictionaryUnavailable
from boggle.data.dictionary import Dictionary, DictionaryConfig, DictionaryService, contains
from boggle.data.normalization import (
    clean_word,
    clean_words,
    normalize_key,
    normalize_tile,
    parse_custom_word_list,
)
from boggle.data.sources import (
    FileWordListSource,
    HttpWordListSource,
    StaticWordListSource,
    parse_word_payload,
)
from tests.helpers import CountingSource, DeferredExecutor, FailingSource


class NormalizationTests(unittest.TestCase):
    def test_clean_word(self) -> None:
        self.assertEqual(clean_word("  Apple "), "apple")
        self.assertIsNone(clean_word("ab"))
        self.assertIsNone(clean_word("don't"))
        self.assertIsNone(clean_word("café"))
        self.assertIsNone(clean_word(""))
        self.assertEqual(clean_word("ab", min_length=2), "ab")

    def test_clean_words_dedups_in_order(self) -> None:
        self.assertEqual(clean_words(["Dog", "cat", "DOG", "x", "cat"]), ["dog", "cat"])

    def test_parse_custom_word_list(self) -> None:
        text = "Zebra, lion\n tiger,,ab  owl"
        self.assertEqual(parse_custom_word_list(text), ["zebra", "lion", "tiger", "owl"])
        self.assertEqual(parse_custom_word_list(""), [])

    def test_normalize_key(self) -> None:
        self.assertEqual(normalize_key("  English "), "english")
        self.assertEqual(normalize_key(None), "")  # type: ignore[arg-type]

    def test_normalize_tile(self) -> None:
        self.assertEqual(normalize_tile("q"), "QU")
        self.assertEqual(normalize_tile("Qu"), "QU")
        self.assertEqual(normalize_tile("x"), "X")
        for bad in ("1", "ab", ""):
            with self.assertRaises(ValueError):
                normalize_tile(bad)


class DictionaryTests(unittest.TestCase):
    def test_membership_is_case_insensitive(self) -> None:
        dictionary = Dictionary("english", frozenset({"cat", "dog"}))
        self.assertTrue(contains(dictionary, "CAT"))
        self.assertIn(" Dog ", dictionary)
        self.assertNotIn("cow", dictionary)
        self.assertNotIn(3, dictionary)
        self.assertEqual(len(dictionary), 2)


class DictionaryServiceTests(unittest.TestCase):
    def test_load_normalizes_words(self) -> None:
        service = DictionaryService(StaticWordListSource({"english": ["Cat", "DOG", "ab", "it's", "cat"]}))
        dictionary = service.load("English")
        self.assertEqual(dictionary.key, "english")
        self.assertEqual(dictionary.words, frozenset({"cat", "dog"}))
        self.assertFalse(dictionary.is_fallback)

    def test_load_is_cached(self) -> None:
        source = CountingSource()
        service = DictionaryService(source)
        first = service.load("english")
        second = service.load(" ENGLISH ")
        self.assertIs(first, second)
        self.assertEqual(source.fetches, ["english"])
        self.assertIs(service.peek("english"), first)

    def test_concurrent_requests_share_one_fetch(self) -> None:
        source = CountingSource()
        executor = DeferredExecutor()
        service = DictionaryService(source, executor=executor)

        first = service.load_async("english")
        second = service.load_async("English")
        self.assertIs(first, second)
        self.assertFalse(first.done())
        self.assertTrue(service.is_loading("english"))
        self.assertEqual(source.fetches, [])

        executor.run_all()
        self.assertTrue(first.done())
        self.assertEqual(source.fetches, ["english"])
        self.assertFalse(service.is_loading("english"))
        self.assertIn("quilt", first.result())

        third = service.load_async("english")
        self.assertTrue(third.done())
        self.assertIs(third.result(), first.result())
        self.assertEqual(source.fetches, ["english"])

    def test_threaded_loads_fetch_once(self) -> None:
        release = threading.Event()
        fetches = []

        class BlockingSource(StaticWordListSource):
            def fetch(self, key):
                fetches.append(key)
                release.wait(5)
                return super().fetch(key)

        with ThreadPoolExecutor(max_workers=2) as executor:
            service = DictionaryService(BlockingSource({"english": ["cat"]}), executor=executor)
            futures = [service.load_async("english") for _ in range(5)]
            release.set()
            results = [future.result(timeout=5) for future in futures]
        self.assertEqual(len({id(result) for result in results}), 1)
        self.assertEqual(fetches, ["english"])

    def test_failures_are_not_cached(self) -> None:
        source = FailingSource(RuntimeError("boom"))
        service = DictionaryService(source)
        with self.assertRaises(DictionaryUnavailable) as ctx:
            service.load("english")
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertIsNone(service.peek("english"))
        self.assertFalse(service.is_loading("english"))
        with self.assertRaises(DictionaryUnavailable):
            service.load("english")
        self.assertEqual(source.fetches, 2)

    def test_malformed_entries_fail_the_load(self) -> None:
        service = DictionaryService(StaticWordListSource({"english": ["cat", 5]}))
        with self.assertRaises(DictionaryUnavailable) as ctx:
            service.load("english")
        self.assertIsInstance(ctx.exception.__cause__, AttributeError)
        self.assertFalse(service.is_loading("english"))
        self.assertTrue(service.load_async("english").done())

    def test_reset_discards_running_loads(self) -> None:
        source = CountingSource()
        executor = DeferredExecutor()
        service = DictionaryService(source, executor=executor)
        future = service.load_async("english")
        service.reset()
        executor.run_all()
        self.assertIn("cat", future.result())
        self.assertIsNone(service.peek("english"))
        self.assertFalse(service.is_loading("english"))

    def test_request_after_reset_joins_running_load(self) -> None:
        source = CountingSource()
        executor = DeferredExecutor()
        service = DictionaryService(source, executor=executor)
        first = service.load_async("english")
        service.reset()
        second = service.load_async("english")
        self.assertIs(first, second)
        executor.run_all()
        self.assertEqual(source.fetches, ["english"])
        self.assertIs(service.peek("english"), second.result())

    def test_unknown_key_falls_back(self) -> None:
        service = DictionaryService(StaticWordListSource({"english": ["cat"]}))
        dictionary = service.load_or_fallback("klingon")
        self.assertTrue(dictionary.is_fallback)
        self.assertIn("cat", dictionary)
        self.assertIsNone(service.peek("klingon"))
        self.assertIs(service.fallback(), dictionary)

    def test_custom_fallback_words(self) -> None:
        config = DictionaryConfig(fallback_words=["Alpha", "beta", "no"])
        service = DictionaryService(FailingSource(DictionaryUnavailable("offline")), config=config)
        self.assertEqual(service.load_or_fallback("english").words, frozenset({"alpha", "beta"}))

    def test_empty_list_is_unavailable(self) -> None:
        service = DictionaryService(StaticWordListSource({"tiny": ["ab", "x1"]}))
        with self.assertRaises(DictionaryUnavailable):
            service.load("tiny")

    def test_shut_down_executor_fails_the_load(self) -> None:
        executor = ThreadPoolExecutor(max_workers=1)
        executor.shutdown()
        service = DictionaryService(CountingSource(), executor=executor)
        future = service.load_async("english")
        self.assertIsInstance(future.exception(timeout=1), DictionaryUnavailable)
        self.assertFalse(service.is_loading("english"))

    def test_register_words(self) -> None:
        service = DictionaryService()
        dictionary = service.register_words("Custom", "Zebra, lion\ntiger ab")
        self.assertEqual(dictionary.words, frozenset({"zebra", "lion", "tiger"}))
        self.assertIs(service.load("custom"), dictionary)
        self.assertEqual(
            service.available_languages(),
            ["english", "spanish", "french", "animals", "food", "custom"],
        )
        service.register_words("custom", ["owl", "emu"])
        self.assertEqual(service.available_languages().count("custom"), 1)
        with self.assertRaises(DictionaryUnavailable):
            service.register_words("empty", "a, b")

    def test_reset_drops_cache(self) -> None:
        source = CountingSource()
        service = DictionaryService(source)
        service.load("english")
        service.register_words("mine", ["apple"])
        service.reset()
        self.assertIsNone(service.peek("english"))
        self.assertNotIn("mine", service.available_languages())
        service.load("english")
        self.assertEqual(source.fetches, ["english", "english"])


class PayloadParsingTests(unittest.TestCase):
    def test_json_object_keys_are_words(self) -> None:
        self.assertEqual(parse_word_payload('{"apple": 1, "banana": 1}'), ["apple", "banana"])

    def test_json_list(self) -> None:
        self.assertEqual(parse_word_payload('  ["apple", "pear"]'), ["apple", "pear"])

    def test_plain_text_skips_comments(self) -> None:
        text = "# header\napple\n\n  pear  \n#skip\n"
        self.assertEqual(parse_word_payload(text), ["apple", "pear"])

    def test_malformed_json(self) -> None:
        with self.assertRaises(DictionaryUnavailable):
            parse_word_payload("[not json")


class FileSourceTests(unittest.TestCase):
    def test_reads_txt_and_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            (directory / "english.txt").write_text("# words\ncat\n\nDog\n", encoding="utf-8")
            (directory / "animals.json").write_text('["lion", "ab"]', encoding="utf-8")
            (directory / "notes.md").write_text("ignored", encoding="utf-8")
            source = FileWordListSource(directory)

            self.assertEqual(list(source.fetch("English")), ["cat", "Dog"])
            self.assertEqual(list(source.fetch("animals")), ["lion", "ab"])
            self.assertEqual(source.available_keys(), ["animals", "english"])
            with self.assertRaises(DictionaryUnavailable):
                source.fetch("french")

            service = DictionaryService(source)
            self.assertEqual(service.load("animals").words, frozenset({"lion"}))

    def test_missing_directory_has_no_keys(self) -> None:
        source = FileWordListSource("/nonexistent/boggle-words")
        self.assertEqual(source.available_keys(), [])


class HttpSourceTests(unittest.TestCase):
    def _session(self, text: str = "", error: Exception = None) -> MagicMock:
        response = MagicMock()
        response.text = text
        if error is not None:
            response.raise_for_status.side_effect = error
        session = MagicMock()
        session.get.return_value = response
        return session

    def test_fetches_and_parses(self) -> None:
        session = self._session('{"apple": 1, "pear": 1}')
        source = HttpWordListSource("https://words.example/{key}.json", session=session)
        self.assertEqual(list(source.fetch("English")), ["apple", "pear"])
        session.get.assert_called_once_with("https://words.example/english.json", timeout=10.0)

    def test_http_error_is_unavailable(self) -> None:
        session = self._session(error=requests.HTTPError("404 Not Found"))
        source = HttpWordListSource("https://words.example/{key}.json", session=session)
        with self.assertRaises(DictionaryUnavailable):
            source.fetch("english")

    def test_connection_error_falls_back(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("offline")
        source = HttpWordListSource("https://words.example/{key}.json", session=session)
        service = DictionaryService(source)
        dictionary = service.load_or_fallback("english")
        self.assertTrue(dictionary.is_fallback)

    def test_available_keys(self) -> None:
        source = HttpWordListSource("https://x/{key}", keys=["English", "Food"], session=MagicMock())
        self.assertEqual(source.available_keys(), ["english", "food"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
