"""Candidate-to-job match scoring and eligibility gating."""

__version__ = "0.1.0"
