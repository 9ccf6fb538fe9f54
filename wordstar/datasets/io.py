from __future__ import annotations
import hashlib
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines (CR/LF stripped, BOM dropped).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8-sig").splitlines()


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line with a trailing newline, creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def sha256_file(p: Path | str) -> str:
    """SHA-256 of a file's raw bytes (identifies exactly which list a game used)."""
    h = hashlib.sha256()
    with Path(p).open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()
