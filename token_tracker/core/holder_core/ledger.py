"""
Ledger query service used by the aggregator.

Only three reads are needed: mint info, raw account bytes and the parsed
token holding of a wallet. ``SolanaLedger`` answers them over JSON-RPC via
``solana-py``; tests substitute an in-memory object with the same methods.
"""

from __future__ import annotations

from typing import Optional, Protocol

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment, Confirmed
from solana.rpc.types import TokenAccountOpts
from solders.pubkey import Pubkey

from .errors import LedgerError
from .models import MintInfo


class LedgerService(Protocol):
    async def get_mint_info(self, mint: Pubkey) -> MintInfo: ...

    async def get_account_data(self, address: Pubkey) -> Optional[bytes]: ...

    async def get_token_holding(self, owner: str, mint: Pubkey) -> Optional[float]: ...

    async def close(self) -> None: ...


class SolanaLedger:
    def __init__(self, rpc_url: str, commitment: Commitment = Confirmed, timeout: float = 30.0):
        self.rpc_url = rpc_url
        self._client = AsyncClient(rpc_url, commitment=commitment, timeout=timeout)

    async def get_mint_info(self, mint: Pubkey) -> MintInfo:
        try:
            res = await self._client.get_token_supply(mint)
        except Exception as exc:
            raise LedgerError(f"getTokenSupply {mint}: {exc}") from exc
        return MintInfo(decimals=int(res.value.decimals), supply=int(res.value.amount))

    async def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        try:
            res = await self._client.get_account_info(address)
        except Exception as exc:
            raise LedgerError(f"getAccountInfo {address}: {exc}") from exc
        if res.value is None:
            return None
        return bytes(res.value.data)

    async def get_token_holding(self, owner: str, mint: Pubkey) -> Optional[float]:
        """UI amount of ``mint`` held by ``owner``; ``None`` when it has no token account."""
        try:
            owner_key = Pubkey.from_string(owner)
        except ValueError as exc:
            raise LedgerError(f"invalid wallet address {owner!r}") from exc
        try:
            res = await self._client.get_token_accounts_by_owner_json_parsed(
                owner_key, TokenAccountOpts(mint=mint)
            )
        except Exception as exc:
            raise LedgerError(f"getTokenAccountsByOwner {owner}: {exc}") from exc

        accounts = res.value or []
        if not accounts:
            return None
        total = 0.0
        for it in accounts:
            amount = it.account.data.parsed["info"]["tokenAmount"]
            ui = amount.get("uiAmountString")
            total += float(ui) if ui is not None else float(amount.get("uiAmount") or 0)
        return total

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "SolanaLedger":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
