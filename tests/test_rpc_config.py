import pytest

from token_tracker.config import rpc
from token_tracker.core.holder_core.config import build_config
from token_tracker.core.holder_core.constants import (
    DEFAULT_TOKEN_ADDRESS,
    DEFAULT_WALLET_FILE,
    METADATA_PROGRAM_ID,
)
from token_tracker.core.holder_core.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("RPC_URL", "HELIUS_API_KEY", "TOKEN_ADDRESS", "WALLET_FILE", "REPORT_DIR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(rpc, "load_dotenv", lambda *a, **k: False)


def test_explicit_url_wins(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://env.example")
    assert rpc.resolve_rpc_url(" https://cli.example ") == "https://cli.example"


def test_env_url(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://env.example")
    assert rpc.resolve_rpc_url() == "https://env.example"


def test_helius_key(monkeypatch):
    monkeypatch.setenv("HELIUS_API_KEY", "abc123")
    assert rpc.resolve_rpc_url() == "https://rpc.helius.xyz/?api-key=abc123"


def test_placeholder_key_ignored(monkeypatch):
    monkeypatch.setenv("HELIUS_API_KEY", "<YOUR_KEY>")
    assert rpc.resolve_rpc_url() == rpc.PUBLIC_MAINNET_URL


def test_public_fallback():
    assert rpc.resolve_rpc_url() == rpc.PUBLIC_MAINNET_URL


def test_redacted():
    assert rpc.redacted("https://rpc.helius.xyz/?api-key=secret") == "https://rpc.helius.xyz/?api-key=***REDACTED***"
    assert rpc.redacted("https://api.mainnet-beta.solana.com") == "https://api.mainnet-beta.solana.com"


def test_build_config_defaults():
    cfg = build_config()
    assert str(cfg.token) == DEFAULT_TOKEN_ADDRESS
    assert cfg.wallet_file == DEFAULT_WALLET_FILE
    assert cfg.output_dir == "."
    assert cfg.rpc_url == rpc.PUBLIC_MAINNET_URL
    assert cfg.delay == 0.2
    assert cfg.metadata_program_id == METADATA_PROGRAM_ID


def test_build_config_env(monkeypatch):
    monkeypatch.setenv("TOKEN_ADDRESS", "So11111111111111111111111111111111111111112")
    monkeypatch.setenv("WALLET_FILE", "holders.txt")
    monkeypatch.setenv("REPORT_DIR", "out")
    cfg = build_config()
    assert str(cfg.token) == "So11111111111111111111111111111111111111112"
    assert cfg.wallet_file == "holders.txt"
    assert cfg.output_dir == "out"


def test_build_config_rejects_bad_values():
    with pytest.raises(ConfigError):
        build_config(token="not-a-key")
    with pytest.raises(ConfigError):
        build_config(delay=-1)
    with pytest.raises(ConfigError):
        build_config(query_timeout=0)
