"""Indexer services."""
