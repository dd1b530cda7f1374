from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from solders.pubkey import Pubkey


class HolderTier(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class MintInfo:
    decimals: int
    supply: int  # raw base units

    @property
    def ui_supply(self) -> float:
        return self.supply / (10 ** self.decimals)


@dataclass(frozen=True)
class MetadataRecord:
    kind: int
    update_authority: Pubkey
    mint: Pubkey
    name: str
    symbol: str
    uri: str


class TokenDescriptor(BaseModel):
    name: str
    symbol: str
    decimals: int = Field(ge=0)
    total_supply: float = Field(alias="totalSupply")
    uri: str = ""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_parts(cls, mint_info: MintInfo, record: MetadataRecord) -> "TokenDescriptor":
        return cls(
            name=record.name,
            symbol=record.symbol,
            decimals=mint_info.decimals,
            total_supply=mint_info.ui_supply,
            uri=record.uri,
        )


class WalletBalanceEntry(BaseModel):
    address: str
    balance: float = Field(ge=0)
    percent_of_supply: float = Field(alias="percentOfSupply")
    tier: HolderTier = Field(default=HolderTier.NONE, exclude=True)
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LargestHolder(BaseModel):
    address: str
    balance: float
    percent_of_supply: float = Field(alias="percentOfSupply")
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RunReport(BaseModel):
    """Everything a single tracker run produces; serialized as the JSON report."""

    timestamp: str
    token_address: str = Field(alias="tokenAddress")
    token_info: TokenDescriptor = Field(alias="tokenInfo")
    total_wallets: int = Field(alias="totalWallets")
    wallets_with_balance: int = Field(alias="walletsWithBalance")
    total_tokens_tracked: float = Field(alias="totalTokensTracked")
    percent_of_supply_tracked: float = Field(alias="percentOfSupplyTracked")
    average_tokens_per_holder: float = Field(alias="averageTokensPerHolder")
    largest_holder: Optional[LargestHolder] = Field(default=None, alias="largestHolder")
    balances: List[WalletBalanceEntry] = Field(default_factory=list)
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
