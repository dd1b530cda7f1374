"""
Decoder for the token metadata account record.

Layout (absolute offsets, one-byte length prefixes)::

    0       kind tag            u8 (not checked)
    1       update authority    32 bytes
    33      mint                32 bytes
    65      name length         u8
    66      name                name length bytes
    ..      symbol length, symbol, uri length, uri

The decoder trusts the buffer to be a metadata record. There is no kind-tag
or checksum validation; the only guarantee is that it never reads past the
end of the buffer.
"""

from __future__ import annotations

from typing import Union

from solders.pubkey import Pubkey

from .constants import METADATA_HEADER_LEN, PUBKEY_LEN
from .errors import MalformedRecord
from .models import MetadataRecord

Bufferish = Union[bytes, bytearray, memoryview]


class _Cursor:
    """Forward-only, bounds-checked reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.offset = 0

    def take(self, n: int, field: str) -> bytes:
        end = self.offset + n
        if end > len(self._data):
            raise MalformedRecord(
                f"{field}: need {n} bytes at offset {self.offset}, buffer has {len(self._data)}"
            )
        chunk = self._data[self.offset:end]
        self.offset = end
        return chunk

    def u8(self, field: str) -> int:
        return self.take(1, field)[0]

    def pubkey(self, field: str) -> Pubkey:
        return Pubkey.from_bytes(self.take(PUBKEY_LEN, field))

    def short_str(self, field: str) -> str:
        length = self.u8(f"{field} length")
        raw = self.take(length, field).rstrip(b"\x00")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecord(f"{field}: not valid UTF-8 ({exc})") from exc


def decode_metadata(buffer: Bufferish) -> MetadataRecord:
    data = bytes(buffer)
    if len(data) < METADATA_HEADER_LEN:
        raise MalformedRecord(
            f"metadata record needs at least {METADATA_HEADER_LEN} bytes, got {len(data)}"
        )

    cur = _Cursor(data)
    kind = cur.u8("kind")
    update_authority = cur.pubkey("update authority")
    mint = cur.pubkey("mint")
    name = cur.short_str("name")
    symbol = cur.short_str("symbol")
    uri = cur.short_str("uri")
    return MetadataRecord(
        kind=kind,
        update_authority=update_authority,
        mint=mint,
        name=name,
        symbol=symbol,
        uri=uri,
    )


def _short_bytes(value: Union[str, bytes], field: str) -> bytes:
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    if len(raw) > 0xFF:
        raise ValueError(f"{field} is {len(raw)} bytes, max is 255")
    return bytes([len(raw)]) + raw


def encode_metadata(
    update_authority: Pubkey,
    mint: Pubkey,
    name: Union[str, bytes],
    symbol: Union[str, bytes],
    uri: Union[str, bytes],
    kind: int = 4,
) -> bytes:
    """Build a record in the layout :func:`decode_metadata` reads."""
    return (
        bytes([kind])
        + bytes(update_authority)
        + bytes(mint)
        + _short_bytes(name, "name")
        + _short_bytes(symbol, "symbol")
        + _short_bytes(uri, "uri")
    )
