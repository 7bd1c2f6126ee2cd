"""Cleans up puzzle strings given on the command line or in a file."""

from pathlib import Path
from typing import Iterable, List, Optional, Union


def normalize_puzzle(raw: str) -> Optional[str]:
    """Drop whitespace; blank lines and ``#`` comments yield None."""
    candidate = raw.strip()
    if not candidate or candidate.startswith("#"):
        return None
    return "".join(candidate.split())


def prepare_puzzles(entries: Iterable[str]) -> List[str]:
    """Remove empty and duplicate entries, keeping the original order."""
    seen: set[str] = set()
    prepared: List[str] = []
    for entry in entries:
        normalized = normalize_puzzle(entry)
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        prepared.append(normalized)
    return prepared


def read_puzzle_file(path: Union[str, Path]) -> List[str]:
    """One puzzle per line."""
    text = Path(path).read_text(encoding="utf-8")
    return text.splitlines()
