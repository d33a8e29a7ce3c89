"""
Tests for bookreel.services.pipeline.job
"""

import pytest

from bookreel.core.exceptions import CodecError
from bookreel.core.logging import job_id_var, step_var
from bookreel.models import PipelineStep
from bookreel.services.pipeline.errors import ErrorCode
from bookreel.services.pipeline.job import PipelineJob


@pytest.mark.asyncio
class TestPipelineJob:
    """Test suite for the job lifecycle"""

    async def test_temp_dir_removed_on_success(self, tmp_path):
        async with PipelineJob(base_dir=tmp_path) as job:
            clip = job.track(job.temp_dir / "clip.mp4")
            clip.write_bytes(b"x")
            assert job.temp_dir.is_dir()
        assert not job.temp_dir.exists()
        assert list(tmp_path.iterdir()) == []

    async def test_cleanup_on_error(self, tmp_path):
        outside = tmp_path / "render_1"
        with pytest.raises(RuntimeError):
            async with PipelineJob(base_dir=tmp_path / "jobs") as job:
                outside.mkdir()
                (outside / "clip_000.mp4").write_bytes(b"x")
                job.track(outside)
                raise RuntimeError("boom")
        assert not outside.exists()
        assert not job.temp_dir.exists()
        assert job.step is PipelineStep.CLEANUP

    async def test_correlation_context(self, tmp_path):
        async with PipelineJob(job_id="job-123", base_dir=tmp_path) as job:
            assert job_id_var.get() == "job-123"
            job.set_step(PipelineStep.FETCHING_ASSETS)
            assert step_var.get() == "fetching visual assets"
        assert job_id_var.get() is None

    async def test_fail_classifies_against_step(self, tmp_path):
        async with PipelineJob(base_dir=tmp_path) as job:
            job.set_step(PipelineStep.ASSEMBLING_VIDEO)
            failure = job.fail(CodecError("no encoder"))
            override = job.fail(RuntimeError("x"), PipelineStep.GENERATING_SCRIPT)
        assert failure.code is ErrorCode.CODEC
        assert failure.step is PipelineStep.ASSEMBLING_VIDEO
        assert override.code is ErrorCode.SCRIPT_GENERATION

    async def test_track_deduplicates(self, tmp_path):
        job = PipelineJob(base_dir=tmp_path)
        job.track(tmp_path / "a")
        job.track(tmp_path / "a")
        assert job.tracked == [tmp_path / "a"]

    async def test_sweep_tolerates_missing_paths(self, tmp_path):
        job = PipelineJob(base_dir=tmp_path)
        job.track(tmp_path / "never-created.mp4")
        assert job.sweep() == 0
