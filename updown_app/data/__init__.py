"""
Data ingestion and normalization module.

Handles conversion of raw indicator payloads into canonical market
snapshots consumed by the probability models.
"""
