import asyncio
import json

import pytest
from solders.pubkey import Pubkey

import tracker_cli
from token_tracker.config import rpc


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("RPC_URL", "HELIUS_API_KEY", "TOKEN_ADDRESS", "WALLET_FILE", "REPORT_DIR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(rpc, "load_dotenv", lambda *a, **k: False)


def _run(argv, factory):
    args = tracker_cli.parser.parse_args(argv)
    return asyncio.run(tracker_cli._amain(args, ledger_factory=factory))


def test_successful_run_writes_report(tmp_path, mint, fake_ledger_cls):
    wallets = tmp_path / "wallet.txt"
    wallets.write_text("W1\nW2\n\nW3\n")
    out_dir = tmp_path / "out"
    ledgers = []

    def factory(url):
        ledger = fake_ledger_cls(mint, holdings={"W1": 500.0, "W3": 5.0})
        ledger.url = url
        ledgers.append(ledger)
        return ledger

    code = _run(
        ["--token", str(mint), "--wallets", str(wallets), "--output-dir", str(out_dir),
         "--rpc", "https://rpc.example", "--delay", "0"],
        factory,
    )

    assert code == 0
    assert ledgers[0].url == "https://rpc.example"
    assert ledgers[0].closed
    files = list(out_dir.glob("token-report-*.json"))
    assert len(files) == 1
    data = json.loads(files[0].read_text())
    assert data["totalWallets"] == 3
    assert data["walletsWithBalance"] == 2
    assert data["totalTokensTracked"] == pytest.approx(505.0)
    assert data["largestHolder"]["address"] == "W1"


def test_missing_wallet_file(tmp_path, mint, fake_ledger_cls):
    created = []

    def factory(url):
        created.append(url)
        return fake_ledger_cls(mint)

    code = _run(
        ["--token", str(mint), "--wallets", str(tmp_path / "missing.txt"), "--output-dir", str(tmp_path)],
        factory,
    )

    assert code == 1
    assert created == []
    assert list(tmp_path.glob("*.json")) == []


def test_missing_token_info_exits_nonzero(tmp_path, mint, fake_ledger_cls):
    wallets = tmp_path / "wallet.txt"
    wallets.write_text("W1\n")
    ledger = fake_ledger_cls(mint, metadata=None)

    code = _run(
        ["--token", str(mint), "--wallets", str(wallets), "--output-dir", str(tmp_path), "--delay", "0"],
        lambda url: ledger,
    )

    assert code == 1
    assert ledger.closed
    assert ledger.queries == []


def test_invalid_token_address(tmp_path, fake_ledger_cls):
    code = _run(["--token", "definitely-not-base58!", "--wallets", str(tmp_path / "w.txt")],
                lambda url: fake_ledger_cls(Pubkey.new_unique()))
    assert code == 1


def test_write_failure_prints_report(tmp_path, mint, fake_ledger_cls, capsys):
    wallets = tmp_path / "wallet.txt"
    wallets.write_text("W1\n")
    blocker = tmp_path / "blocked"
    blocker.write_text("")

    code = _run(
        ["--token", str(mint), "--wallets", str(wallets), "--output-dir", str(blocker), "--delay", "0"],
        lambda url: fake_ledger_cls(mint, holdings={"W1": 1.0}),
    )

    assert code == 1
    out = capsys.readouterr().out
    assert '"totalTokensTracked"' in out


def test_main_reports_unexpected_errors(monkeypatch):
    async def boom(args):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(tracker_cli, "_amain", boom)
    assert tracker_cli.main([]) == 1
