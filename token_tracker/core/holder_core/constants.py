from solders.pubkey import Pubkey

# Token Metadata program owning the per-mint metadata accounts
METADATA_PROGRAM_ID = Pubkey.from_string("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")
METADATA_SEED = b"metadata"

DEFAULT_TOKEN_ADDRESS = "43VWkd99HjqkhFTZbWBpMpRhjG469nWa7x7uEsgSH7We"
DEFAULT_WALLET_FILE = "wallet.txt"
DEFAULT_REPORT_DIR = "."
REPORT_PREFIX = "token-report"

# seconds
DEFAULT_WALLET_DELAY = 0.2
DEFAULT_QUERY_TIMEOUT = 15.0

# percent of total supply
HIGH_SHARE_PCT = 1.0
MEDIUM_SHARE_PCT = 0.1

# fixed part of a metadata record: tag + update authority + mint + name length
METADATA_HEADER_LEN = 66
PUBKEY_LEN = 32
