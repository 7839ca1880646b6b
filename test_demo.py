import pytest

import table_settings
from chained_hash_table import HashTable
from demo import lookup_message, main


class TestDemo:
    def test_mismatched_lookup(self, capsys):
        main([])
        assert capsys.readouterr().out == "tes has no value.\n"

    def test_matching_lookup(self, capsys):
        main(["--lookup", "test"])
        assert capsys.readouterr().out == "test: value\n"

    def test_custom_pair(self, capsys):
        main(["--key", "foo", "--value", "bar", "--lookup", "foo"])
        assert capsys.readouterr().out == "foo: bar\n"

    def test_lookup_message(self):
        table = HashTable()
        table.insert("a", "b")
        assert lookup_message(table, "a") == "a: b"
        assert lookup_message(table, "c") == "c has no value."


class TestSettings:
    def test_seed_parsing(self, monkeypatch):
        monkeypatch.setenv("HASH_TABLE_SEED", "0x10")
        assert table_settings.Settings().SEED == 16

    def test_seed_unset(self, monkeypatch):
        monkeypatch.delenv("HASH_TABLE_SEED", raising=False)
        assert table_settings.Settings().SEED is None

    def test_invalid_seed(self, monkeypatch):
        monkeypatch.setenv("HASH_TABLE_SEED", "abc")
        with pytest.raises(ValueError):
            table_settings.Settings()

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("HASH_TABLE_LOG_LEVEL", "info")
        assert table_settings.Settings().LOG_LEVEL == "INFO"

    def test_demo_with_configured_log_level(self, monkeypatch, capsys):
        monkeypatch.setattr(table_settings.settings, "LOG_LEVEL", "INFO")
        main([])
        assert capsys.readouterr().out == "tes has no value.\n"

    def test_debug_flag(self, monkeypatch):
        monkeypatch.setenv("HASH_TABLE_DEBUG", "TRUE")
        assert table_settings.Settings().DEBUG is True
