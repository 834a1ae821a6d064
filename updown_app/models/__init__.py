"""
Data models and contracts module.

Immutable result structures produced by the probability models.
Follows functional programming principles with frozen dataclasses.
"""
