"""Core data models for Odinpack."""

from .entities import Candidate, CompressionFailure, CompressionResult, PackResult

__all__ = ["Candidate", "CompressionFailure", "CompressionResult", "PackResult"]
