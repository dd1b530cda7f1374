from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .errors import InputFileMissing


def parse_wallet_lines(text: str) -> List[str]:
    """One address per line; blank lines and ``#`` comments are skipped."""
    wallets: List[str] = []
    for line in text.splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        wallets.append(entry)
    return wallets


def read_wallet_file(path: Union[str, Path]) -> List[str]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputFileMissing(str(p)) from exc
    return parse_wallet_lines(text)
