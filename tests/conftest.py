import asyncio
import io
import os
import sys
from typing import Dict, List, Optional, Tuple

import pytest
from rich.console import Console
from solders.pubkey import Pubkey

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from token_tracker.core.holder_core.console import HolderConsole
from token_tracker.core.holder_core.metadata import encode_metadata
from token_tracker.core.holder_core.models import MintInfo
from token_tracker.core.holder_core.pdas import derive_metadata_pda


_AUTO = object()


class FakeLedger:
    """In-memory ledger. ``holdings`` values may be a float, ``None`` (no account) or an exception."""

    def __init__(
        self,
        mint: Pubkey,
        decimals: int = 2,
        supply: int = 100_000,
        name: str = "Test Token",
        symbol: str = "TEST",
        uri: str = "https://example.com/test.json",
        holdings: Optional[Dict[str, object]] = None,
        metadata=_AUTO,
    ) -> None:
        self.mint = mint
        self.mint_info = MintInfo(decimals=decimals, supply=supply)
        if metadata is _AUTO:
            metadata = encode_metadata(Pubkey.new_unique(), mint, name, symbol, uri)
        self.accounts: Dict[Pubkey, bytes] = {}
        if metadata is not None:
            self.accounts[derive_metadata_pda(mint)] = metadata
        self.holdings: Dict[str, object] = dict(holdings or {})
        self.queries: List[str] = []
        self.account_lookups: List[Pubkey] = []
        self.closed = False
        self.hang: Tuple[str, ...] = ()

    async def get_mint_info(self, mint: Pubkey) -> MintInfo:
        return self.mint_info

    async def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        self.account_lookups.append(address)
        return self.accounts.get(address)

    async def get_token_holding(self, owner: str, mint: Pubkey) -> Optional[float]:
        self.queries.append(owner)
        if owner in self.hang:
            await asyncio.sleep(10)
        value = self.holdings.get(owner)
        if isinstance(value, Exception):
            raise value
        return value

    async def close(self) -> None:
        self.closed = True


class RecordingLog:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def _rec(self, level, msg, source=None, payload=None):
        self.records.append((level, msg))

    def debug(self, msg, source=None, payload=None):
        self._rec("debug", msg)

    def info(self, msg, source=None, payload=None):
        self._rec("info", msg)

    def banner(self, msg, source=None, payload=None):
        self._rec("banner", msg)

    def success(self, msg, source=None, payload=None):
        self._rec("success", msg)

    def warning(self, msg, source=None, payload=None):
        self._rec("warning", msg)

    def error(self, msg, source=None, payload=None):
        self._rec("error", msg)

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def mint():
    return Pubkey.new_unique()


@pytest.fixture
def fake_ledger_cls():
    return FakeLedger


@pytest.fixture
def recording_log():
    return RecordingLog()


@pytest.fixture
def quiet_console():
    return HolderConsole(Console(file=io.StringIO(), force_terminal=False, width=120))
