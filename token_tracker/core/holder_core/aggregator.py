"""
Sequential wallet balance aggregation.

Init -> fetch descriptor -> per-wallet loop -> finalize -> persist.
Wallets are processed one at a time in input order; the running counters are
only folded after each query returns.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, List, Optional, Union

from solders.pubkey import Pubkey

from token_tracker.core.logging import log as default_log

from .console import HolderConsole, abbr_addr
from .constants import (
    DEFAULT_QUERY_TIMEOUT,
    DEFAULT_WALLET_DELAY,
    HIGH_SHARE_PCT,
    MEDIUM_SHARE_PCT,
    METADATA_PROGRAM_ID,
)
from .errors import ConfigError, LedgerError, TokenInfoUnavailable, WalletQueryFailed
from .ledger import LedgerService
from .metadata import decode_metadata
from .models import (
    HolderTier,
    LargestHolder,
    RunReport,
    TokenDescriptor,
    WalletBalanceEntry,
)
from .pdas import derive_metadata_pda
from .report_writer import ReportWriter, iso_timestamp

SOURCE = "holder_core"


def percent_of_supply(balance: float, total_supply: float) -> float:
    if total_supply <= 0:
        return 0.0
    return balance * 100 / total_supply


def classify_share(balance: float, pct: float) -> HolderTier:
    if balance <= 0:
        return HolderTier.NONE
    if pct >= HIGH_SHARE_PCT:
        return HolderTier.HIGH
    if pct >= MEDIUM_SHARE_PCT:
        return HolderTier.MEDIUM
    return HolderTier.LOW


class BalanceAggregator:
    def __init__(
        self,
        ledger: LedgerService,
        *,
        log: Any = None,
        console: Optional[HolderConsole] = None,
        writer: Optional[ReportWriter] = None,
        metadata_program_id: Pubkey = METADATA_PROGRAM_ID,
        delay: float = DEFAULT_WALLET_DELAY,
        query_timeout: float = DEFAULT_QUERY_TIMEOUT,
    ) -> None:
        self.ledger = ledger
        self.log = log or default_log
        self.console = console or HolderConsole()
        self.writer = writer or ReportWriter()
        self.metadata_program_id = metadata_program_id
        self.delay = max(0.0, float(delay))
        self.query_timeout = query_timeout

    # ------------------------------------------------------------------
    # Descriptor
    # ------------------------------------------------------------------
    async def fetch_token_descriptor(self, mint: Pubkey) -> TokenDescriptor:
        try:
            mint_info = await asyncio.wait_for(self.ledger.get_mint_info(mint), self.query_timeout)
        except (LedgerError, asyncio.TimeoutError) as exc:
            raise TokenInfoUnavailable(f"mint info for {mint} unavailable: {exc!r}") from exc

        metadata_address = derive_metadata_pda(mint, self.metadata_program_id)
        self.log.debug(f"metadata account {metadata_address}", source=SOURCE)
        try:
            raw = await asyncio.wait_for(
                self.ledger.get_account_data(metadata_address), self.query_timeout
            )
        except (LedgerError, asyncio.TimeoutError) as exc:
            raise TokenInfoUnavailable(f"metadata account {metadata_address}: {exc!r}") from exc
        if raw is None:
            raise TokenInfoUnavailable(f"no metadata account at {metadata_address} for {mint}")

        record = decode_metadata(raw)
        if record.mint != mint:
            raise TokenInfoUnavailable(
                f"metadata at {metadata_address} describes mint {record.mint}, expected {mint}"
            )
        return TokenDescriptor.from_parts(mint_info, record)

    # ------------------------------------------------------------------
    # Per wallet
    # ------------------------------------------------------------------
    async def query_wallet_balance(self, address: str, mint: Pubkey) -> float:
        try:
            amount = await asyncio.wait_for(
                self.ledger.get_token_holding(address, mint), self.query_timeout
            )
        except asyncio.TimeoutError as exc:
            raise WalletQueryFailed(address, f"timed out after {self.query_timeout}s") from exc
        except LedgerError as exc:
            raise WalletQueryFailed(address, str(exc)) from exc
        if amount is None:
            return 0.0
        return float(amount)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    async def run(self, token_address: Union[str, Pubkey], wallets: Iterable[str]) -> RunReport:
        if isinstance(token_address, Pubkey):
            mint = token_address
        else:
            try:
                mint = Pubkey.from_string(token_address)
            except ValueError as exc:
                raise ConfigError(f"token is not a valid address: {token_address!r}") from exc
        wallets = list(wallets)

        self.log.banner("Token Balance Check", source=SOURCE)
        self.log.info("Fetching token info...", source=SOURCE)
        info = await self.fetch_token_descriptor(mint)
        self.console.token_info(info)

        self.log.info(f"Checking {len(wallets)} wallets", source=SOURCE)
        self.console.rule()

        total = 0.0
        holders = 0
        largest: Optional[WalletBalanceEntry] = None
        balances: List[WalletBalanceEntry] = []

        for i, wallet in enumerate(wallets):
            try:
                balance = await self.query_wallet_balance(wallet, mint)
            except WalletQueryFailed as exc:
                self.log.warning(f"{abbr_addr(wallet)}: {exc.reason}; recording 0", source=SOURCE)
                balance = 0.0

            pct = percent_of_supply(balance, info.total_supply)
            entry = WalletBalanceEntry(
                address=wallet,
                balance=balance,
                percent_of_supply=pct,
                tier=classify_share(balance, pct),
            )
            balances.append(entry)
            total += balance
            if balance > 0:
                holders += 1
                if largest is None or balance > largest.balance:
                    largest = entry

            self.console.wallet_line(entry, info.symbol)

            if self.delay and i < len(wallets) - 1:
                await asyncio.sleep(self.delay)

        report = RunReport(
            timestamp=iso_timestamp(),
            token_address=str(mint),
            token_info=info,
            total_wallets=len(wallets),
            wallets_with_balance=holders,
            total_tokens_tracked=total,
            percent_of_supply_tracked=percent_of_supply(total, info.total_supply),
            average_tokens_per_holder=(total / holders) if holders else 0.0,
            largest_holder=(
                LargestHolder(
                    address=largest.address,
                    balance=largest.balance,
                    percent_of_supply=largest.percent_of_supply,
                )
                if largest is not None
                else None
            ),
            balances=balances,
        )
        self.console.summary(report)

        path = self.writer.write(report)
        self.log.success(f"Report saved to {path}", source=SOURCE)
        return report
