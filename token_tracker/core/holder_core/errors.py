"""Failures raised while building a holder report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import RunReport


class TrackerError(RuntimeError):
    pass


class ConfigError(TrackerError):
    pass


class MalformedRecord(TrackerError):
    """Metadata buffer is shorter than its own length prefixes demand."""


class TokenInfoUnavailable(TrackerError):
    """Token descriptor could not be built; percentages are meaningless without it."""


class WalletQueryFailed(TrackerError):
    """Transport or service failure for a single wallet. Recoverable."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"balance query failed for {address}: {reason}")
        self.address = address
        self.reason = reason


class InputFileMissing(TrackerError):
    def __init__(self, path: str) -> None:
        super().__init__(f"wallet list not found: {path}")
        self.path = path


class ReportWriteFailed(TrackerError):
    """Report could not be persisted. The finished report rides along."""

    def __init__(self, path: str, reason: str, report: Optional["RunReport"] = None) -> None:
        super().__init__(f"could not write report to {path}: {reason}")
        self.path = path
        self.report = report


class LedgerError(TrackerError):
    """The ledger service could not answer (transport, RPC error, bad address)."""
