"""
Word-list validator for mrdle.

What this module does:
- Inspect one word file the way WordStore.from_file() will read it
  (trim, lowercase, skip blanks), but collect every problem instead of
  stopping at the first one.
- Infer the word length from the first non-blank line and flag lines of any
  other length (these make WordStore loading fail).
- Flag non-alphabetic lines, duplicates and blank lines; compute SHA-256.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from mrdle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

# How many offending lines to quote in a report
MAX_EXAMPLES = 5


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class LineProblem:
    lineno: int          # 1-based line number
    text: str            # the trimmed line


@dataclass
class ValidationReport:
    path: str
    exists: bool
    sha256: str                      # SHA-256 of raw file bytes (empty string if missing)
    lines: int                       # total lines in the file
    blank_lines: int                 # empty/whitespace-only lines (skipped, not an error)
    words: int                       # non-blank lines
    unique_count: int                # distinct words after lowercasing
    word_length: int                 # length of the first word (0 if none)
    length_mismatches: List[LineProblem] = field(default_factory=list)
    non_alpha: List[LineProblem] = field(default_factory=list)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word file.

    Parameters
    ----------
    path : str
        Word file, one word per line.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport) where `passed`
        requires: file exists, at least one word, uniform length, alphabetic
        words only. Duplicates are reported but do not fail the check
        (the store de-duplicates on load).
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path=str(p), exists=False, sha256="", lines=0, blank_lines=0,
                               words=0, unique_count=0, word_length=0,
                               issues=[f"word file not found: {path}"])
        return asdict(rep)

    lines = p.read_text(encoding="utf-8").splitlines()
    blank = 0
    seen = set()
    words = 0
    word_len = 0
    mismatches: List[LineProblem] = []
    non_alpha: List[LineProblem] = []

    for lineno, raw in enumerate(lines, start=1):
        w = raw.strip()
        if not w:
            blank += 1
            continue
        words += 1
        if word_len == 0:
            word_len = len(w)
        if len(w) != word_len:
            mismatches.append(LineProblem(lineno, w))
        if not w.isalpha():
            non_alpha.append(LineProblem(lineno, w))
        seen.add(w.lower())

    issues: List[str] = []
    if words == 0:
        issues.append("word file contains 0 words")
    if mismatches:
        first = mismatches[0]
        issues.append(f"{len(mismatches)} line(s) differ from word length {word_len} "
                      f"(first: line {first.lineno} {first.text!r})")
    if non_alpha:
        issues.append(f"{len(non_alpha)} non-alphabetic line(s)")
    if len(seen) != words:
        issues.append(f"{words - len(seen)} duplicate line(s)")

    passed = words > 0 and not mismatches and not non_alpha

    rep = ValidationReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=len(lines),
        blank_lines=blank,
        words=words,
        unique_count=len(seen),
        word_length=word_len,
        length_mismatches=mismatches[:MAX_EXAMPLES],
        non_alpha=non_alpha[:MAX_EXAMPLES],
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | L=5 | words=2315 (uniq=2315, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | L={report['word_length']} "
        f"| words={report['words']} (uniq={report['unique_count']}, sha={sha}) "
        f"| {status}"
    )
