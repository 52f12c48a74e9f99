"""Tests for the CLI module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from draft2html.cli import main

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_JSON = FIXTURE_DIR / "sample.json"


class TestCLIMain:
    """Test the main() entry point."""

    def test_missing_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert "draft2html" in capsys.readouterr().out

    def test_file_not_found(self, capsys):
        ret = main(["nonexistent.json"])
        assert ret == 1
        err = capsys.readouterr().err
        assert "not found" in err

    def test_convert_sample(self, tmp_path, capsys):
        out = tmp_path / "output.html"
        ret = main([str(SAMPLE_JSON), "-o", str(out)])
        assert ret == 0
        assert out.read_text(encoding="utf-8").startswith("<h1>Release notes</h1>\n")
        assert "Converted:" in capsys.readouterr().out

    def test_verbose_flag(self, tmp_path, capsys):
        out = tmp_path / "output.html"
        ret = main([str(SAMPLE_JSON), "-o", str(out), "-v"])
        assert ret == 0
        stdout = capsys.readouterr().out
        assert "Input:" in stdout
        assert "Output:" in stdout
        assert "Done." in stdout

    def test_default_output_name(self, tmp_path, capsys):
        src = tmp_path / "content.json"
        src.write_text(json.dumps({"blocks": [{"text": "Test"}]}), encoding="utf-8")
        ret = main([str(src)])
        assert ret == 0
        expected = tmp_path / "content.html"
        assert expected.read_text(encoding="utf-8") == "<p>Test</p>\n"

    def test_invalid_json(self, tmp_path, capsys):
        src = tmp_path / "broken.json"
        src.write_text("{not json", encoding="utf-8")
        ret = main([str(src)])
        assert ret == 1
        assert "invalid JSON" in capsys.readouterr().err

    def test_invalid_content(self, tmp_path, capsys):
        src = tmp_path / "bad.json"
        src.write_text(
            json.dumps({"blocks": [{"text": "ab", "entityRanges": [{"offset": 0, "length": 1, "key": 5}]}]}),
            encoding="utf-8",
        )
        ret = main([str(src)])
        assert ret == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "5" in err
        assert not (tmp_path / "bad.html").exists()

    def test_wrong_encoding(self, tmp_path, capsys):
        src = tmp_path / "content.json"
        src.write_text(json.dumps({"blocks": [{"text": "héllo"}]}, ensure_ascii=False), encoding="utf-8")
        ret = main([str(src), "-e", "ascii"])
        assert ret == 1
        assert "ascii" in capsys.readouterr().err
        assert not (tmp_path / "content.html").exists()

    def test_unknown_encoding(self, tmp_path, capsys):
        src = tmp_path / "content.json"
        src.write_text(json.dumps({"blocks": [{"text": "hi"}]}), encoding="utf-8")
        ret = main([str(src), "-e", "nope"])
        assert ret == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "nope" in err
