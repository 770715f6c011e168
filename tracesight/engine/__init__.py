"""TraceSight trace analysis engine."""

from tracesight.engine.registry import transform, Layer, get_registry
from tracesight.engine.config import AnalysisConfig
from tracesight.engine.context import AnalysisContext
from tracesight.engine.pipeline import Pipeline, analyze_traces

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "AnalysisConfig",
    "AnalysisContext",
    "Pipeline",
    "analyze_traces",
]
