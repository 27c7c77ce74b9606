"""
Unit tests for the JSON and script loaders.
"""

from src.chaldean_clock.data.loader import load_json, load_lines


class TestLoader:
    """Tests for load_json() and load_lines()."""

    def test_load_json_missing_returns_none(self, tmp_path):
        assert load_json(tmp_path / "missing.json") is None

    def test_load_lines(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("SetHour 3\nPauseTime\n", encoding="utf-8")
        assert load_lines(path) == ["SetHour 3", "PauseTime"]

    def test_load_lines_missing_file(self, tmp_path):
        assert load_lines(tmp_path / "nope.txt") == []

    def test_load_lines_bad_encoding(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_bytes(b"SetHour 3\n\xff\xfe\xfa\n")
        assert load_lines(path) == []
