import os
import unittest
from pathlib import Path
from unittest import mock

from csvsearch.config import Config, load_config, parse_delimiter
from csvsearch.errors import InvalidSearchRequest, SourceUnavailable
from csvsearch.request import validate_search_request


class TestSearchRequest(unittest.TestCase):
    def test_defaults_and_trim(self):
        r = validate_search_request({"query": "  paris ", "page": None}, default_page_size=1000)
        self.assertEqual(r.query, "paris")
        self.assertEqual(r.page, 1)
        self.assertEqual(r.page_size, 1000)

    def test_missing_query_is_match_all(self):
        r = validate_search_request({"query": None}, default_page_size=10)
        self.assertEqual(r.query, "")

    def test_page_is_clamped(self):
        for raw, want in [(0, 1), (-4, 1), ("7", 7), ("3abc", 3), ("abc", 1), ("", 1), (2.9, 2)]:
            r = validate_search_request({"page": raw}, default_page_size=10)
            self.assertEqual(r.page, want, raw)

    def test_bad_page_size(self):
        with self.assertRaises(InvalidSearchRequest):
            validate_search_request({"page_size": 0}, default_page_size=10)
        with self.assertRaises(ValueError):
            validate_search_request({"page_size": "many"}, default_page_size=10)

    def test_bad_page_size_fixup(self):
        r = validate_search_request({"page_size": -5}, default_page_size=10, fixup=True)
        self.assertEqual(r.page_size, 10)


class TestConfig(unittest.TestCase):
    def tearDown(self):
        # don't leak patched values through the cached singleton
        load_config(reload=True)

    def test_env_overrides(self):
        env = {
            "CSV_PATH": "/tmp/people.tsv",
            "PAGE_SIZE": "50",
            "CSV_DELIMITER": "",
            "LOG_LEVEL": "debug",
            "LARGE_FILE_MB": "oops",
        }
        with mock.patch.dict(os.environ, env):
            cfg = load_config(reload=True)
        self.assertEqual(cfg.csv_path, Path("/tmp/people.tsv"))
        self.assertEqual(cfg.page_size, 50)
        self.assertIsNone(cfg.delimiter)
        self.assertEqual(cfg.resolved_delimiter(), "\t")
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.large_file_mb, 50.0)

    def test_bad_page_size_falls_back(self):
        with mock.patch.dict(os.environ, {"PAGE_SIZE": "0"}):
            self.assertEqual(load_config(reload=True).page_size, 1000)
        with mock.patch.dict(os.environ, {"PAGE_SIZE": "ten"}):
            self.assertEqual(load_config(reload=True).page_size, 1000)

    def test_cached(self):
        self.assertIs(load_config(), load_config())

    def test_parse_delimiter(self):
        self.assertEqual(parse_delimiter("tab"), "\t")
        self.assertEqual(parse_delimiter("\\t"), "\t")
        self.assertEqual(parse_delimiter("PIPE"), "|")
        self.assertEqual(parse_delimiter(";"), ";")
        self.assertIsNone(parse_delimiter(None))

    def test_validate_for_search(self):
        with self.assertRaises(SourceUnavailable):
            Config(csv_path=Path("/definitely/not/here.csv")).validate_for_search()


if __name__ == "__main__":
    unittest.main()
