# src/fritter/services/__init__.py
"""Business logic services for the Fritter application."""

from .freet_service import FreetService
from .gate import GateRequest, ValidationGate
from .similarity import CorpusSimilarityOracle, SimilarityOracle

__all__ = [
    "CorpusSimilarityOracle",
    "FreetService",
    "GateRequest",
    "SimilarityOracle",
    "ValidationGate",
]
