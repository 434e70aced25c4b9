"""End-to-end tests for the word count CLI entry point."""

import json
import logging
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from wordcount_cli.logging_config import setup_logging
from wordcount_cli.main import cli_entry_point, main


class TestMain:
    """Test cases for main()."""

    def test_count_words_from_file(self, tmp_path, capsys):
        """Test the default word count of a file."""
        test_file = tmp_path / "words.txt"
        test_file.write_text("aa bb cc bb\n", encoding="utf-8")

        exit_code = main([str(test_file)])

        captured = capsys.readouterr()
        assert exit_code == 0
        lines = captured.out.splitlines()
        assert lines[0].split() == ["unit", "count"]
        assert lines[1].split() == ["bb", "2"]
        assert sorted(line.split()[0] for line in lines[2:]) == ["aa", "cc"]

    def test_count_lines_json(self, tmp_path, capsys):
        """Test JSON output of a line count."""
        test_file = tmp_path / "lines.txt"
        test_file.write_text("line1\nline2\nline1", encoding="utf-8")

        exit_code = main([str(test_file), "--mode", "line", "--json"])

        parsed = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert parsed["counts"] == {"line1": 2, "line2": 1}
        assert parsed["source"] == str(test_file)
        assert parsed["mode"] == "line"

    def test_count_characters_of_crlf_file(self, tmp_path, capsys):
        """Test that carriage returns in a CRLF file are counted."""
        test_file = tmp_path / "crlf.txt"
        test_file.write_bytes(b"a\r\nb")

        exit_code = main([str(test_file), "--mode", "char", "--json"])

        parsed = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert parsed["counts"] == {"a": 1, "\r": 1, "\n": 1, "b": 1}

    def test_count_lines_of_mixed_terminator_file(self, tmp_path, capsys):
        """Test line counting over CRLF, CR and LF terminators in one file."""
        test_file = tmp_path / "mixed.txt"
        test_file.write_bytes(b"x\r\nx\ry\nx\r\n")

        exit_code = main([str(test_file), "--mode", "line", "--json"])

        parsed = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert parsed["counts"] == {"x": 3, "y": 1}

    def test_count_characters_from_stdin(self, capsys):
        """Test counting characters read from stdin."""
        with patch.object(sys, "stdin", StringIO("ab")):
            exit_code = main(["--mode", "char", "--json"])

        parsed = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert parsed["counts"] == {"a": 1, "b": 1}
        assert parsed["source"] == "stdin"

    def test_empty_input_prints_nothing(self, capsys):
        """Test that an empty table produces no table output."""
        with patch.object(sys, "stdin", StringIO("")):
            exit_code = main([])

        assert exit_code == 0
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys):
        """Test that a missing file exits with status 1 and no output."""
        missing = tmp_path / "missing.txt"

        exit_code = main([str(missing)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert f"Error: File not found: {missing}" in captured.err

    def test_directory_path(self, tmp_path, capsys):
        """Test that a directory path exits with status 1."""
        exit_code = main([str(tmp_path)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Error: Is a directory" in captured.err

    def test_undecodable_file(self, tmp_path, capsys):
        """Test that a non-UTF-8 file exits with status 1."""
        test_file = tmp_path / "binary.bin"
        test_file.write_bytes(b"\xff\xfe\x00")

        exit_code = main([str(test_file)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Failed to decode file" in captured.err

    def test_invalid_mode_exits_with_usage_error(self, capsys):
        """Test that an invalid mode is an argument error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--mode", "paragraph"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 2
        assert captured.out == ""
        assert "Unknown count mode: paragraph" in captured.err

    def test_verbose_logs_to_stderr(self, tmp_path, capsys):
        """Test that --verbose writes debug logs to stderr only."""
        test_file = tmp_path / "words.txt"
        test_file.write_text("aa aa", encoding="utf-8")

        exit_code = main([str(test_file), "--json", "--verbose"])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert json.loads(captured.out)["counts"] == {"aa": 2}
        assert "[DEBUG]" in captured.err
        assert "Counted 2 word units (1 distinct)" in captured.err

    def test_cli_entry_point_exits_with_main_status(self, tmp_path, capsys):
        """Test that the console entry point exits with main's status."""
        with patch.object(sys, "argv", ["wordcount", str(tmp_path / "nope.txt")]):
            with pytest.raises(SystemExit) as exc_info:
                cli_entry_point()

        assert exc_info.value.code == 1


class TestSetupLogging:
    """Test cases for setup_logging()."""

    def test_default_level_is_warning(self, monkeypatch):
        """Test that the default level is WARNING."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        logger = setup_logging()

        assert logger.name == "wordcount_cli"
        assert logger.level == logging.WARNING

    def test_verbose_forces_debug(self, monkeypatch):
        """Test that verbose overrides LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_log_level_from_environment(self, monkeypatch):
        """Test that LOG_LEVEL sets the level."""
        monkeypatch.setenv("LOG_LEVEL", "info")

        assert setup_logging().level == logging.INFO

    def test_invalid_log_level_falls_back_to_warning(self, monkeypatch):
        """Test that an unknown LOG_LEVEL falls back to WARNING."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert setup_logging().level == logging.WARNING

    def test_repeated_setup_keeps_one_handler(self):
        """Test that calling setup twice does not duplicate handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1
