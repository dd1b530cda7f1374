"""Report how much of one SPL token a list of wallets holds."""

import argparse
import asyncio
import sys
from typing import Callable, List, Optional

from token_tracker.config.rpc import redacted
from token_tracker.core.holder_core.aggregator import BalanceAggregator
from token_tracker.core.holder_core.config import build_config
from token_tracker.core.holder_core.console import HolderConsole
from token_tracker.core.holder_core.errors import (
    ConfigError,
    ReportWriteFailed,
    TrackerError,
)
from token_tracker.core.holder_core.ledger import LedgerService, SolanaLedger
from token_tracker.core.holder_core.report_writer import ReportWriter
from token_tracker.core.holder_core.wallet_list import read_wallet_file
from token_tracker.core.logging import configure_console_log, log

parser = argparse.ArgumentParser(description="SPL token holder tracker")
parser.add_argument("--token", help="Token mint address (default: $TOKEN_ADDRESS or built-in)")
parser.add_argument("--wallets", help="Wallet list, one address per line (default: $WALLET_FILE or wallet.txt)")
parser.add_argument("--output-dir", help="Directory for the JSON report (default: $REPORT_DIR or .)")
parser.add_argument("--rpc", help="RPC URL (default: $RPC_URL, Helius key, or public mainnet)")
parser.add_argument("--delay", type=float, help="Seconds to wait between wallets (default: 0.2)")
parser.add_argument("--timeout", type=float, help="Per-query timeout in seconds (default: 15)")
parser.add_argument("--metadata-program", help="Override the token metadata program id")
parser.add_argument("--debug", action="store_true", help="Verbose logging")


async def _amain(
    args: argparse.Namespace,
    ledger_factory: Callable[[str], LedgerService] = SolanaLedger,
) -> int:
    configure_console_log(args.debug)
    log.info("Initializing Token Balance Tracker...")

    try:
        cfg = build_config(
            token=args.token,
            wallet_file=args.wallets,
            output_dir=args.output_dir,
            rpc_url=args.rpc,
            delay=args.delay,
            query_timeout=args.timeout,
            metadata_program=args.metadata_program,
        )
    except ConfigError as exc:
        log.error(f"Configuration error: {exc}")
        return 1

    try:
        wallets = read_wallet_file(cfg.wallet_file)
    except TrackerError as exc:
        log.error(f"Error: {exc}")
        return 1

    log.info(f"RPC endpoint: {redacted(cfg.rpc_url)}")
    log.info("Processing wallet addresses...")

    holder_console = HolderConsole()
    ledger = ledger_factory(cfg.rpc_url)
    aggregator = BalanceAggregator(
        ledger,
        log=log,
        console=holder_console,
        writer=ReportWriter(cfg.output_dir),
        metadata_program_id=cfg.metadata_program_id,
        delay=cfg.delay,
        query_timeout=cfg.query_timeout,
    )
    try:
        await aggregator.run(cfg.token, wallets)
    except ReportWriteFailed as exc:
        log.error(f"Error: {exc}")
        if exc.report is not None:
            holder_console.dump_report(exc.report)
        return 1
    except TrackerError as exc:
        log.error(f"Error: {exc}")
        return 1
    finally:
        await ledger.close()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parser.parse_args(argv)
    try:
        return asyncio.run(_amain(args))
    except KeyboardInterrupt:
        log.warning("Interrupted")
        return 130
    except Exception as exc:
        log.error(f"Main process error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
