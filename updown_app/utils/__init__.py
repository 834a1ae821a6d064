"""
Utility functions module.

Numeric helpers shared by the probability models: clamping, finiteness
checks, the normal CDF and log-odds transforms.

Numeric Semantics:
- ``None`` always means "unknown" and is never treated as zero
- Every value that represents a probability is clamped into [0, 1]
- NaN and infinities never escape a helper
"""
