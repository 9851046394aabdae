"""Composed derivations behind the investment and end-use detail views."""

from estate_metrics.analysis.end_use import EndUseAnalysis, analyze_end_use
from estate_metrics.analysis.investment import InvestmentAnalysis, analyze_investment

__all__ = [
    "EndUseAnalysis",
    "InvestmentAnalysis",
    "analyze_end_use",
    "analyze_investment",
]
