"""
Pipeline workers.

Batch coordinators, the chunking and summarization stages, and the
orchestrator that runs them in one process.

Dependencies: asyncio (stdlib), newsdigest.core, newsdigest.boundary.db
System role: Background processing
"""

from newsdigest.workers.cancellation import CancellationToken
from newsdigest.workers.chunking_worker import ChunkingStage
from newsdigest.workers.coordinator import BackoffPolicy, BatchCoordinator, PipelineStage
from newsdigest.workers.orchestrator import PipelineOrchestrator
from newsdigest.workers.rate_limiter import AsyncTokenBucket
from newsdigest.workers.summarization_worker import SummarizationStage

__all__ = [
    "AsyncTokenBucket",
    "BackoffPolicy",
    "BatchCoordinator",
    "CancellationToken",
    "ChunkingStage",
    "PipelineOrchestrator",
    "PipelineStage",
    "SummarizationStage",
]
