import os
from typing import Optional

from dotenv import load_dotenv


PLACEHOLDER_VALUES = {"<YOUR_KEY>", "YOUR_KEY", "changeme"}
PUBLIC_MAINNET_URL = "https://api.mainnet-beta.solana.com"


def _usable(key: str) -> bool:
    return bool(key) and "placeholder" not in key.lower() and key not in PLACEHOLDER_VALUES


def _read_helius_key() -> Optional[str]:
    key = (os.getenv("HELIUS_API_KEY") or "").strip()
    if _usable(key):
        return key

    load_dotenv()
    key = (os.getenv("HELIUS_API_KEY") or "").strip()
    return key if _usable(key) else None


def helius_url(key: str) -> str:
    return f"https://rpc.helius.xyz/?api-key={key}"


def resolve_rpc_url(explicit: Optional[str] = None) -> str:
    """Pick the RPC endpoint for this run.

    Order of precedence:

    1. ``explicit`` (the ``--rpc`` flag)
    2. ``$RPC_URL``
    3. ``$HELIUS_API_KEY`` (environment or ``.env``)
    4. the public mainnet endpoint (rate-limited)
    """

    if explicit and explicit.strip():
        return explicit.strip()

    one = os.getenv("RPC_URL", "").strip()
    if one:
        return one

    key = _read_helius_key()
    if key:
        return helius_url(key)

    return PUBLIC_MAINNET_URL


def redacted(url: str) -> str:
    base, sep, _ = url.partition("?")
    if not sep:
        return base
    return f"{base}?api-key=***REDACTED***"
