"""Модуль расширенных толкований и анализа ладони"""
from .provider import (
    DestinyInsightProvider,
    HttpInsightProvider,
    LocalInsightProvider,
    get_insight_provider,
)
from .palm import (
    HttpPalmAnalyzer,
    PalmAnalysisProvider,
    StubPalmAnalyzer,
    get_palm_analyzer,
)

__all__ = [
    'DestinyInsightProvider',
    'HttpInsightProvider',
    'LocalInsightProvider',
    'get_insight_provider',
    'HttpPalmAnalyzer',
    'PalmAnalysisProvider',
    'StubPalmAnalyzer',
    'get_palm_analyzer',
]
