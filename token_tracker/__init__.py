"""Token holder tracking for Solana SPL tokens."""

__version__ = "0.1.0"
