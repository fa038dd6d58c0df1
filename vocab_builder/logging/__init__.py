"""Run logging for vocabulary generation.

Provides a JSONL event log the pipeline reports its decisions to.
"""

from .generation_log import GenerationLog

__all__ = [
    "GenerationLog",
]
