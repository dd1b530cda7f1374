from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey

from token_tracker.config.rpc import resolve_rpc_url

from .constants import (
    DEFAULT_QUERY_TIMEOUT,
    DEFAULT_REPORT_DIR,
    DEFAULT_TOKEN_ADDRESS,
    DEFAULT_WALLET_DELAY,
    DEFAULT_WALLET_FILE,
    METADATA_PROGRAM_ID,
)
from .errors import ConfigError


@dataclass(frozen=True)
class TrackerConfig:
    token: Pubkey
    wallet_file: str
    output_dir: str
    rpc_url: str
    delay: float = DEFAULT_WALLET_DELAY
    query_timeout: float = DEFAULT_QUERY_TIMEOUT
    metadata_program_id: Pubkey = METADATA_PROGRAM_ID


def _pubkey(value: str, what: str) -> Pubkey:
    try:
        return Pubkey.from_string(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{what} is not a valid address: {value!r}") from exc


def build_config(
    token: Optional[str] = None,
    wallet_file: Optional[str] = None,
    output_dir: Optional[str] = None,
    rpc_url: Optional[str] = None,
    delay: Optional[float] = None,
    query_timeout: Optional[float] = None,
    metadata_program: Optional[str] = None,
) -> TrackerConfig:
    """Merge CLI values over ``$TOKEN_ADDRESS``/``$WALLET_FILE``/``$REPORT_DIR`` and the defaults."""
    token = token or os.getenv("TOKEN_ADDRESS") or DEFAULT_TOKEN_ADDRESS
    delay = DEFAULT_WALLET_DELAY if delay is None else delay
    query_timeout = DEFAULT_QUERY_TIMEOUT if query_timeout is None else query_timeout
    if delay < 0:
        raise ConfigError(f"delay must be >= 0, got {delay}")
    if query_timeout <= 0:
        raise ConfigError(f"timeout must be > 0, got {query_timeout}")

    return TrackerConfig(
        token=_pubkey(token, "token"),
        wallet_file=wallet_file or os.getenv("WALLET_FILE") or DEFAULT_WALLET_FILE,
        output_dir=output_dir or os.getenv("REPORT_DIR") or DEFAULT_REPORT_DIR,
        rpc_url=resolve_rpc_url(rpc_url),
        delay=delay,
        query_timeout=query_timeout,
        metadata_program_id=(
            _pubkey(metadata_program, "metadata program") if metadata_program else METADATA_PROGRAM_ID
        ),
    )
