"""Tests for the format1-report command."""

import io
from pathlib import Path

import pytest

from format1.main import main


class TestMain:
    def test_prints_report(self, sample_file: Path, env_file: Path, capsys):
        assert main([str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Report from FORMAT-1 file:\nVersion: 1.0\n")
        assert "- Person(name='Bob Smith', tag='2')\n  (no computers)\n" in out
        assert out.endswith("\n\n")

    def test_reads_stdin(
        self, sample_text: str, env_file: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ):
        monkeypatch.setattr("sys.stdin", io.StringIO(sample_text))
        assert main(["-"]) == 0
        assert "Comment: Office inventory\n" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, env_file: Path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().out == ""

    def test_requires_path(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_rejects_extra_arguments(self, sample_file: Path):
        with pytest.raises(SystemExit):
            main([str(sample_file), "other"])

    def test_lenient_by_default(self, tmp_path: Path, env_file: Path, capsys):
        path = tmp_path / "loose.txt"
        path.write_text("stray line\nComputer 1\nX 1 2 3\n")
        assert main([str(path)]) == 0
        assert "Unowned computers:\n  (none)\n" in capsys.readouterr().out

    def test_strict_mode_from_config(self, tmp_path: Path, env_file: Path, capsys):
        env_file.write_text("FORMAT1_STRICT=true\n")
        path = tmp_path / "loose.txt"
        path.write_text("stray line\n")
        assert main([str(path)]) == 2
        assert capsys.readouterr().out == ""

    def test_placeholder_from_config(self, tmp_path: Path, env_file: Path, capsys):
        env_file.write_text('FORMAT1_NO_NAME_PLACEHOLDER="(unknown)"\n')
        path = tmp_path / "anon.txt"
        path.write_text("People 1\n3\n")
        assert main([str(path)]) == 0
        assert "Person(name='(unknown)', tag='3')" in capsys.readouterr().out
