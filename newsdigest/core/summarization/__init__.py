"""
Summary generation: summarizer capability and per-item aggregation.
"""

from newsdigest.core.summarization.aggregator import SummaryAggregator
from newsdigest.core.summarization.schema import Summarizer, SummaryContext, SummaryResult
from newsdigest.core.summarization.summarizer import LLMSummarizer

__all__ = [
    "LLMSummarizer",
    "Summarizer",
    "SummaryAggregator",
    "SummaryContext",
    "SummaryResult",
]
