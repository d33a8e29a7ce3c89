"""
Stage outcomes.

Every pipeline stage reports a ``StageSuccess`` or a ``StageFailure`` instead
of raising across the stage boundary. The orchestrator matches on the variant
to continue or abort.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, Tuple, TypeVar, Union

from ...models.status import PipelineStep

T = TypeVar("T")


@dataclass(frozen=True)
class StageSuccess(Generic[T]):
    value: T
    source: str = ""

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class StageFailure:
    error: Exception
    step: Optional[PipelineStep] = None
    attempts: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error

    def at(self, step: PipelineStep) -> "StageFailure":
        """Same failure attributed to ``step``"""
        return StageFailure(error=self.error, step=step, attempts=self.attempts)


StageResult = Union[StageSuccess[T], StageFailure]
