"""
Word list validator for wordstar.

What this module does:
- Validate a dictionary file (every accepted guess) and, optionally, a targets
  file (the pool hidden words are drawn from).
- Enforce formatting rules (lowercase, alphabetic, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that targets ⊆ dictionary (a target outside the dictionary could never
  be guessed, and GameSession refuses it).
- Return a machine-readable dict and a pretty one-line summary.

Typical use:
    from wordstar.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "wordstar/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .io import sha256_file


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int           # valid lines
    unique_count: int    # valid words after dedupe
    invalid_lines: int
    sha256: str          # empty if missing
    utf8_ok: bool = True  # False if any bytes failed to decode


@dataclass
class ValidationReport:
    N: int
    dictionary: FileReport
    targets: Optional[FileReport]
    targets_subset_dictionary: bool
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _is_valid_word(w: str, N: int) -> bool:
    return w == w.lower() and w.isalpha() and len(w) == N


def _check_file(path: str, N: int) -> Tuple[FileReport, set]:
    """
    Load and check one word list. Blank lines count as invalid.
    Returns (report, set of valid words).
    """
    p = Path(path)
    if not p.exists():
        return FileReport(path, False, 0, 0, 0, ""), set()

    valid: List[str] = []
    invalid = 0
    data = p.read_bytes()
    try:
        text = data.decode("utf-8-sig")
        utf8_ok = True
    except UnicodeDecodeError:
        # undecodable bytes become U+FFFD, which is not alphabetic, so only
        # the affected lines count as invalid
        text = data.decode("utf-8-sig", errors="replace")
        utf8_ok = False

    for raw in text.splitlines():
        w = raw.strip()
        if w and _is_valid_word(w, N):
            valid.append(w)
        else:
            invalid += 1

    uniq = set(valid)
    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(valid),
        unique_count=len(uniq),
        invalid_lines=invalid,
        sha256=sha256_file(p),
        utf8_ok=utf8_ok,
    )
    return rep, uniq


def _file_issues(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues = []
    if not rep.utf8_ok:
        issues.append(f"{label} is not valid UTF-8")
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return issues


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(N: int, dictionary_path: str, targets_path: str | None = None) -> Dict:
    """
    Validate the dictionary (and optional targets) word lists for length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: files exist, are non-empty, have no invalid lines, and
    targets ⊆ dictionary. Duplicates are reported but do not fail the check
    (WordSet collapses them).
    """
    dict_rep, dict_words = _check_file(dictionary_path, N)
    issues = _file_issues("dictionary", dict_rep)

    targets_rep = None
    subset_ok = True
    if targets_path is not None:
        targets_rep, target_words = _check_file(targets_path, N)
        issues += _file_issues("targets", targets_rep)
        subset_ok = targets_rep.exists and target_words.issubset(dict_words)
        if targets_rep.exists and not subset_ok:
            missing = sorted(target_words - dict_words)[:5]
            issues.append(f"targets not subset of dictionary (e.g., {missing})")

    def _clean(rep: Optional[FileReport]) -> bool:
        return rep is None or (rep.exists and rep.utf8_ok and rep.count > 0
                                   and rep.invalid_lines == 0)

    passed = _clean(dict_rep) and _clean(targets_rep) and subset_ok

    rep = ValidationReport(
        N=N,
        dictionary=dict_rep,
        targets=targets_rep,
        targets_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | dictionary=120 (uniq=120, sha=abc123...) | OK
    """
    d = report["dictionary"]
    parts = [f"N={report['N']}",
             f"dictionary={d['count']} (uniq={d['unique_count']}, sha={d['sha256'][:12]})"]
    t = report.get("targets")
    if t is not None:
        parts.append(f"targets={t['count']} (uniq={t['unique_count']}, sha={t['sha256'][:12]})")
        parts.append(f"targets⊆dictionary={report['targets_subset_dictionary']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
