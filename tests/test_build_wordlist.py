from pathlib import Path

import pytest
import requests
from script import build_wordlist
from script.build_wordlist import extract_words, fetch_text, unique_preserve_order


class _FakeResponse:
    def __init__(self, text: str, content_type: str, status: int = 200):
        self.text = text
        self.headers = {"Content-Type": content_type}
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def _serve(monkeypatch, response):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return response

    monkeypatch.setattr(build_wordlist.requests, "get", fake_get)
    return calls


def test_extract_words_filters_and_dedupes():
    lines = ["Crane, raise; STARE", "cranes crane 12345 ab", "", "trace_cared"]
    assert extract_words(lines, 5) == ["crane", "raise", "stare", "trace", "cared"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_fetch_text_plain(monkeypatch):
    calls = _serve(monkeypatch, _FakeResponse("crane\nraise\n", "text/plain; charset=utf-8"))
    text = fetch_text("https://example.org/words.txt")
    assert calls == [("https://example.org/words.txt", 30)]
    assert extract_words(text.splitlines(), 5) == ["crane", "raise"]


def test_fetch_text_html_strips_markup(monkeypatch):
    page = ("<html><head><title>Wordle</title></head><body>"
            "<h1>Past answers</h1><ul><li>CRANE</li><li><b>stare</b></li>"
            "<li>raise</li></ul></body></html>")
    _serve(monkeypatch, _FakeResponse(page, "text/html; charset=utf-8"))
    text = fetch_text("https://example.org/answers")
    assert "<li>" not in text
    assert extract_words(text.splitlines(), 5) == ["crane", "stare", "raise"]


def test_fetch_text_http_error(monkeypatch):
    _serve(monkeypatch, _FakeResponse("gone", "text/plain", status=404))
    with pytest.raises(requests.HTTPError):
        fetch_text("https://example.org/missing.txt")


def test_main_local_file(monkeypatch, capsys, tmp_path: Path):
    src = tmp_path / "raw.txt"
    out = tmp_path / "out" / "words_5.txt"
    src.write_text("Stare crane\nraise, crane\ncranes\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["build_wordlist", "--in", str(src), "--N", "5",
                                     "--out", str(out), "--sort"])
    build_wordlist.main()
    assert out.read_text(encoding="utf-8") == "crane\nraise\nstare\n"
    assert "Wrote 3 unique 5-letter words" in capsys.readouterr().out


def test_main_url(monkeypatch, tmp_path: Path):
    _serve(monkeypatch, _FakeResponse("<p>plane planet</p><p>crane</p>", "text/html"))
    out = tmp_path / "words_6.txt"
    monkeypatch.setattr("sys.argv", ["build_wordlist", "--url", "https://example.org/",
                                     "--N", "6", "--out", str(out)])
    build_wordlist.main()
    assert out.read_text(encoding="utf-8") == "planet\n"
