from __future__ import annotations

from typing import List

from solders.pubkey import Pubkey

from .constants import METADATA_PROGRAM_ID, METADATA_SEED

__all__ = ["find_program_address", "derive_metadata_pda"]


def find_program_address(seeds: List[bytes], program_id: Pubkey) -> Pubkey:
    pda, _ = Pubkey.find_program_address(seeds, program_id)
    return pda


def derive_metadata_pda(mint: Pubkey, program_id: Pubkey = METADATA_PROGRAM_ID) -> Pubkey:
    """PDA(["metadata", program_id, mint], program_id)"""
    return find_program_address([METADATA_SEED, bytes(program_id), bytes(mint)], program_id)
