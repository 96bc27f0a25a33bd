"""Testy CLI: has-title oraz ptc check / lint / check-url."""

import io
import json

import pytest
import requests

from ptc.cli import has_title_main, main


def _exit_code(func, argv):
    with pytest.raises(SystemExit) as exc_info:
        func(argv)
    return exc_info.value.code


class TestHasTitle:
    def test_title_found_exits_zero(self):
        assert _exit_code(has_title_main, ["{% block title %} Hello {% endblock %}"]) == 0

    def test_no_title_exits_one(self):
        assert _exit_code(has_title_main, ["<head></head>"]) == 1

    def test_missing_argument_is_usage_error(self, capsys):
        assert _exit_code(has_title_main, []) == 2
        assert "TEKST" in capsys.readouterr().err

    @pytest.mark.parametrize("text", [
        "--x\n<head><title>T</title></head>",
        "---\ntitle: x\n---\n{% block title %}Front{% endblock %}",
        "-<head><title>T</title></head>",
    ])
    def test_dash_prefixed_document_is_text(self, text):
        """Dokument zaczynający się od "-" nie jest traktowany jak opcja."""
        assert _exit_code(has_title_main, [text]) == 0

    def test_dash_prefixed_document_without_title_exits_one(self):
        assert _exit_code(has_title_main, ["---\ntitle: x\n---\n<body></body>"]) == 1

    def test_explicit_separator_is_accepted(self):
        assert _exit_code(has_title_main, ["--", "-<head><title>T</title></head>"]) == 0

    def test_prints_nothing(self, capsys):
        _exit_code(has_title_main, ["<head><title>A</title></head>"])
        captured = capsys.readouterr()
        assert captured.out == ""


class TestCheck:
    def test_exit_codes(self):
        assert _exit_code(main, ["check", "<head><title>A</title></head>"]) == 0
        assert _exit_code(main, ["check", "<head><title> </title></head>"]) == 1

    def test_show_prints_title(self, capsys):
        _exit_code(main, ["check", "{% block title %}Moje wideo{% endblock %}", "--show"])
        out = capsys.readouterr().out
        assert "Moje wideo" in out
        assert "template_block" in out

    def test_json_output(self, capsys):
        code = _exit_code(main, ["check", "<body></body>", "--json-output"])
        assert code == 1
        data = json.loads(capsys.readouterr().out)
        assert data[0]["is_valid"] is False
        assert data[0]["title"] is None
        assert data[0]["errors"][0]["code"] == "E_TITLE_MISSING"

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("<head><title>Z stdin</title></head>"))
        assert _exit_code(main, ["check", "-"]) == 0

    def test_dash_prefixed_document_from_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("---\nlayout: x\n---\n{% block title %}F{% endblock %}"))
        assert _exit_code(main, ["check", "-"]) == 0


class TestLintCommand:
    def test_all_pages_with_title(self, tmp_path, capsys):
        (tmp_path / "a.html").write_text("<head><title>A</title></head>", encoding="utf-8")
        (tmp_path / "b.html").write_text("{% block title %}B{% endblock %}", encoding="utf-8")
        main(["lint", str(tmp_path), "--json-output"])
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 2
        assert all(item["is_valid"] for item in data)
        assert sorted(item["title"] for item in data) == ["A", "B"]

    def test_missing_title_exits_one(self, tmp_path, capsys):
        (tmp_path / "ok.html").write_text("<head><title>A</title></head>", encoding="utf-8")
        (tmp_path / "bad.html").write_text("<body></body>", encoding="utf-8")
        assert _exit_code(main, ["lint", str(tmp_path), "--json-output"]) == 1
        data = json.loads(capsys.readouterr().out)
        by_name = {item["source"].rsplit("/", 1)[-1].rsplit("\\", 1)[-1]: item for item in data}
        assert by_name["ok.html"]["is_valid"] is True
        assert by_name["bad.html"]["is_valid"] is False

    def test_include_filters_directory(self, tmp_path, capsys):
        (tmp_path / "page.html").write_text("<body></body>", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("{% block title %}T{% endblock %}", encoding="utf-8")
        main(["lint", str(tmp_path), "--include", "*.txt", "--json-output"])
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert data[0]["title"] == "T"

    def test_include_from_environment(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("PTC_INCLUDE", "*.jinja")
        (tmp_path / "page.jinja").write_text("{% block title %}J{% endblock %}", encoding="utf-8")
        (tmp_path / "page.html").write_text("<body></body>", encoding="utf-8")
        main(["lint", str(tmp_path), "--json-output"])
        data = json.loads(capsys.readouterr().out)
        assert [item["title"] for item in data] == ["J"]

    def test_empty_directory_exits_one(self, tmp_path):
        assert _exit_code(main, ["lint", str(tmp_path)]) == 1

    def test_missing_file_is_reported(self, tmp_path):
        assert _exit_code(main, ["lint", str(tmp_path / "nope.html")]) == 1


class _FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code
        self.encoding = None
        self.apparent_encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class TestCheckUrl:
    def test_page_with_title(self, monkeypatch):
        calls = {}

        def fake_get(url, timeout, headers):
            calls["url"] = url
            calls["timeout"] = timeout
            return _FakeResponse("<html><head><title>Example</title></head></html>")

        monkeypatch.setenv("PTC_HTTP_TIMEOUT", "7")
        monkeypatch.setattr("title_parser.fetch.requests.get", fake_get)
        assert _exit_code(main, ["check-url", "https://example.com/"]) == 0
        assert calls == {"url": "https://example.com/", "timeout": 7.0}

    def test_http_error_exits_one(self, monkeypatch, capsys):
        monkeypatch.setattr(
            "title_parser.fetch.requests.get",
            lambda url, timeout, headers: _FakeResponse("", status_code=404),
        )
        assert _exit_code(main, ["check-url", "https://example.com/missing"]) == 1
        assert "404" in capsys.readouterr().out

    def test_connection_error_exits_one(self, monkeypatch):
        def fake_get(url, timeout, headers):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr("title_parser.fetch.requests.get", fake_get)
        assert _exit_code(main, ["check-url", "https://example.invalid/"]) == 1
