# SPDX-License-Identifier: AGPL-3.0-only

"""
Metrics and observability utilities.
"""
import logging
import time
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    RECEIVED = "received"
    EXTRACTING = "extracting"
    CLASSIFYING = "classifying"
    PROMPTING = "prompting"
    INVOKING = "invoking"
    NORMALIZING = "normalizing"
    SUCCESS = "success"
    FALLBACK = "fallback"
    RESPONDED = "responded"


# Allowed next states for every state. Fallback is entered from Invoking or
# Normalizing; Extracting may be skipped for text requests.
TRANSITIONS: Dict[PipelineState, Tuple[PipelineState, ...]] = {
    PipelineState.RECEIVED: (PipelineState.EXTRACTING, PipelineState.CLASSIFYING, PipelineState.PROMPTING),
    PipelineState.EXTRACTING: (PipelineState.CLASSIFYING,),
    PipelineState.CLASSIFYING: (PipelineState.PROMPTING,),
    PipelineState.PROMPTING: (PipelineState.INVOKING,),
    PipelineState.INVOKING: (PipelineState.NORMALIZING, PipelineState.FALLBACK),
    PipelineState.NORMALIZING: (PipelineState.SUCCESS, PipelineState.FALLBACK),
    PipelineState.SUCCESS: (PipelineState.RESPONDED,),
    PipelineState.FALLBACK: (PipelineState.RESPONDED,),
    PipelineState.RESPONDED: (),
}


class PipelineTrace:
    """Track state transitions and timings for one request."""

    def __init__(self, task: str = ""):
        self.task = task
        self.start_time = time.time()
        self.end_time: Optional[float] = None
        self.state = PipelineState.RECEIVED
        self.stages: List[Tuple[PipelineState, float]] = [(PipelineState.RECEIVED, self.start_time)]
        self.llm_calls = 0
        self.degraded_reason: Optional[str] = None
        self.errors: List[str] = []

    def advance(self, state: PipelineState):
        """Move to the next state; an illegal transition raises ValueError."""
        state = PipelineState(state)
        if state not in TRANSITIONS[self.state]:
            raise ValueError(f"Illegal pipeline transition {self.state.value} -> {state.value}")
        self.state = state
        self.stages.append((state, time.time()))
        if state is PipelineState.RESPONDED:
            self.end_time = time.time()
        logger.debug("[%s] -> %s", self.task or "pipeline", state.value)

    def record_call(self):
        """Count an upstream request actually sent."""
        self.llm_calls += 1

    def fall_back(self, reason: str):
        """Enter Fallback, recording why."""
        self.degraded_reason = reason
        self.errors.append(reason)
        self.advance(PipelineState.FALLBACK)

    @property
    def degraded(self) -> bool:
        return any(state is PipelineState.FALLBACK for state, _ in self.stages)

    @property
    def path(self) -> List[str]:
        return [state.value for state, _ in self.stages]

    def duration(self) -> float:
        """Get total duration in seconds."""
        if self.end_time:
            return self.end_time - self.start_time
        return time.time() - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task": self.task,
            "path": self.path,
            "duration_seconds": self.duration(),
            "llm_calls": self.llm_calls,
            "degraded_reason": self.degraded_reason,
            "errors": self.errors,
            "start_time": datetime.fromtimestamp(self.start_time).isoformat(),
            "end_time": datetime.fromtimestamp(self.end_time).isoformat() if self.end_time else None,
        }
