from .aggregator import BalanceAggregator, classify_share, percent_of_supply
from .errors import (
    ConfigError,
    InputFileMissing,
    LedgerError,
    MalformedRecord,
    ReportWriteFailed,
    TokenInfoUnavailable,
    TrackerError,
    WalletQueryFailed,
)
from .ledger import LedgerService, SolanaLedger
from .metadata import decode_metadata, encode_metadata
from .models import (
    HolderTier,
    LargestHolder,
    MetadataRecord,
    MintInfo,
    RunReport,
    TokenDescriptor,
    WalletBalanceEntry,
)

__all__ = [
    "BalanceAggregator",
    "classify_share",
    "percent_of_supply",
    "ConfigError",
    "InputFileMissing",
    "LedgerError",
    "MalformedRecord",
    "ReportWriteFailed",
    "TokenInfoUnavailable",
    "TrackerError",
    "WalletQueryFailed",
    "LedgerService",
    "SolanaLedger",
    "decode_metadata",
    "encode_metadata",
    "HolderTier",
    "LargestHolder",
    "MetadataRecord",
    "MintInfo",
    "RunReport",
    "TokenDescriptor",
    "WalletBalanceEntry",
]
