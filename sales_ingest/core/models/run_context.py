"""
RunContext: per-run accumulators shared by the validator stages.
"""

import uuid
from dataclasses import dataclass, field


@dataclass
class RunContext:
    """
    State owned by exactly one processing call.

    A fresh context is created for every process_file/process_stream call
    and discarded afterwards, so nothing leaks between batches or between
    concurrent runs that share a TransformConfig.

    Attributes:
        run_id: Identifier used in log lines
        seen_transaction_ids: Identifiers already validated in this run
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    seen_transaction_ids: set[str] = field(default_factory=set)
