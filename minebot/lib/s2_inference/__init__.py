"""Module s2_inference : Estimation du risque par case."""

from .engine import infer, InferenceEngine, InferenceStats, RiskMap

__all__ = [
    "infer",
    "InferenceEngine",
    "InferenceStats",
    "RiskMap",
]
