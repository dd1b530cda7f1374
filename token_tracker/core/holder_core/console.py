# -*- coding: utf-8 -*-
"""Rich rendering for per-wallet progress lines and the run summary."""

from __future__ import annotations

import json
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import HolderTier, RunReport, TokenDescriptor, WalletBalanceEntry

HR_WIDTH = 50

_TIER_STYLE = {
    HolderTier.HIGH: "green",
    HolderTier.MEDIUM: "yellow",
    HolderTier.LOW: "red",
    HolderTier.NONE: "red",
}


def abbr_addr(a: Any) -> str:
    s = "" if a is None else str(a)
    return "—" if not s else (s if len(s) <= 16 else f"{s[:8]}...{s[-6:]}")


def fmt_amount(x: Any) -> str:
    try:
        v = float(x)
    except (TypeError, ValueError):
        return "—"
    s = f"{v:,.6f}".rstrip("0").rstrip(".")
    return s or "0"


class HolderConsole:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def rule(self) -> None:
        self.console.print("-" * HR_WIDTH, highlight=False)

    def token_info(self, info: TokenDescriptor) -> None:
        self.console.print(Text(f"Token Name: {info.name}", style="green"))
        self.console.print(Text(f"Token Symbol: {info.symbol}", style="green"))
        self.console.print(Text(f"Token Decimals: {info.decimals}", style="green"))
        self.console.print(Text(f"Total Supply: {fmt_amount(info.total_supply)}", style="green"))

    def wallet_line(self, entry: WalletBalanceEntry, symbol: str) -> None:
        style = _TIER_STYLE.get(entry.tier, "red")
        self.console.print(Text(f"Wallet: {abbr_addr(entry.address)}", style="white"))
        self.console.print(Text(f"Balance: {fmt_amount(entry.balance)} {symbol}", style=style))
        self.console.print(Text(f"Percent of Supply: {entry.percent_of_supply:.4f}%", style="blue"))
        self.rule()

    def summary(self, report: RunReport) -> None:
        info = report.token_info
        table = Table(title="SUMMARY", title_style="bold green", box=box.SIMPLE, show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="cyan", justify="right")
        table.add_row("Token Name", Text(info.name))
        table.add_row("Token Symbol", Text(info.symbol))
        table.add_row("Total Supply", fmt_amount(info.total_supply))
        table.add_row("Total wallets checked", str(report.total_wallets))
        table.add_row("Wallets with balance", str(report.wallets_with_balance))
        table.add_row("Total tokens tracked", fmt_amount(report.total_tokens_tracked))
        table.add_row("Percent of supply tracked", f"{report.percent_of_supply_tracked:.2f}%")
        table.add_row("Average tokens per holder", fmt_amount(report.average_tokens_per_holder))
        self.console.print(table)

        top = report.largest_holder
        if top is None:
            self.console.print(Text("No wallet holds this token.", style="yellow"))
            return
        self.console.print(Text(f"Largest holder: {abbr_addr(top.address)}", style="yellow"))
        self.console.print(
            Text(
                f"Largest balance: {fmt_amount(top.balance)} tokens "
                f"({top.percent_of_supply:.2f}% of supply)",
                style="yellow",
            )
        )

    def dump_report(self, report: RunReport) -> None:
        """Print the full JSON report, used when it could not be saved."""
        self.console.print_json(json.dumps(report.to_json_dict()))
