"""
Pipeline job lifecycle

A job owns a private temp directory, the set of files its stages create and
the label of the step it is in. Used as an async context manager; leaving
the block sweeps every tracked path and the temp directory on every exit
path.
"""

import shutil
import uuid
from pathlib import Path
from typing import List, Optional

from ...config import TEMP_DIR
from ...core.logging import get_logger, job_id_var, step_var
from ...models.status import PipelineStep
from .errors import PipelineFailure, classify_error

logger = get_logger(__name__, component="pipeline_job")


class PipelineJob:
    def __init__(self, job_id: Optional[str] = None, base_dir: Optional[Path] = None):
        self.job_id = job_id or uuid.uuid4().hex
        self.temp_dir = Path(base_dir or TEMP_DIR) / f"job_{self.job_id}"
        self.step = PipelineStep.INITIALIZATION
        self._tracked: List[Path] = []
        self._tokens = ()

    @property
    def tracked(self) -> List[Path]:
        return list(self._tracked)

    async def __aenter__(self) -> "PipelineJob":
        self.temp_dir.mkdir(parents=True, exist_ok=True)
        self._tokens = (job_id_var.set(self.job_id), step_var.set(self.step.label))
        logger.info("Job started", extra={"temp_dir": str(self.temp_dir)})
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        failed_step = self.step
        self.set_step(PipelineStep.CLEANUP)
        removed = self.sweep()
        logger.info(
            "Job finished",
            extra={"outcome": "error" if exc_type else "done", "last_step": failed_step.label, "removed_paths": removed},
        )
        if self._tokens:
            job_token, step_token = self._tokens
            step_var.reset(step_token)
            job_id_var.reset(job_token)
            self._tokens = ()
        return False

    def set_step(self, step: PipelineStep) -> None:
        self.step = step
        step_var.set(step.label)
        logger.info(f"Step: {step.label}")

    def track(self, path: Path) -> Path:
        """Register a file or directory for removal when the job ends"""
        path = Path(path)
        if path not in self._tracked:
            self._tracked.append(path)
        return path

    def fail(self, exc: Exception, step: Optional[PipelineStep] = None) -> PipelineFailure:
        """Classify ``exc`` against the current step (or ``step``)"""
        if step is not None:
            self.set_step(step)
        failure = classify_error(exc, self.step)
        logger.error(
            f"Job failed at {self.step.label}",
            extra={"code": failure.code.value, "error_type": type(exc).__name__, "details": failure.details},
        )
        return failure

    def sweep(self) -> int:
        """Remove tracked paths, then the temp directory. Failures are logged, never raised."""
        removed = 0
        for path in list(reversed(self._tracked)) + [self.temp_dir]:
            try:
                if path.is_dir():
                    shutil.rmtree(path)
                elif path.exists():
                    path.unlink()
                else:
                    continue
                removed += 1
            except OSError as exc:
                logger.warning("Cleanup failed", extra={"path": str(path), "error": str(exc)})
        self._tracked.clear()
        return removed
