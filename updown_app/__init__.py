"""
UpDown App - Short-Window Binary Market Probability Engine

Estimates the probability that a short-lived "finish above the strike"
prediction market resolves up, by blending a technical-indicator score with
a lognormal diffusion model of the remaining price path.
"""

__version__ = "0.1.0"
__author__ = "TA2 Team"
