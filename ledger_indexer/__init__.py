"""Checkpointed on-chain event indexer maintaining a per-wallet balance ledger."""

__version__ = "0.1.0"
