"""
Tests for bookreel.services.pipeline.fallback and results
"""

import pytest

from bookreel.core.exceptions import AssetNotFoundError, AuthenticationError, UpstreamError
from bookreel.models import PipelineStep
from bookreel.services.pipeline.fallback import FallbackChain, Provider
from bookreel.services.pipeline.results import StageFailure, StageSuccess


def _failing(message, error_type=UpstreamError):
    def call(*args, **kwargs):
        raise error_type(message, "test")
    return call


@pytest.mark.asyncio
class TestFallbackChain:
    """Test suite for FallbackChain"""

    async def test_sync_and_async_providers(self):
        async def async_call(value):
            return value * 2

        chain = FallbackChain("double", [Provider("async", async_call)])
        result = await chain.run(21)
        assert result == StageSuccess(value=42, source="async")

    async def test_falls_through_to_next(self):
        chain = FallbackChain(
            "script",
            [Provider("ai", _failing("quota")), Provider("template", lambda title: f"About {title}")],
        )
        result = await chain.run("Atomic Habits")
        assert result.ok
        assert result.value == "About Atomic Habits"
        assert result.source == "template"

    async def test_all_fail_keeps_last_error(self):
        chain = FallbackChain("x", [Provider("a", _failing("first")), Provider("b", _failing("second"))])
        result = await chain.run()
        assert isinstance(result, StageFailure)
        assert str(result.error) == "second"
        assert result.attempts == ("a", "b")

    async def test_fatal_error_stops_chain(self):
        called = []
        chain = FallbackChain(
            "voices",
            [Provider("remote", _failing("bad key", AuthenticationError)), Provider("premade", lambda: called.append(1))],
            fatal=(AuthenticationError,),
        )
        result = await chain.run()
        assert isinstance(result.error, AuthenticationError)
        assert called == []

    async def test_empty_chain(self):
        result = await FallbackChain("empty", []).run()
        assert isinstance(result.error, AssetNotFoundError)
        assert FallbackChain("empty", []).provider_names == ()


class TestStageResults:
    """Test suite for StageSuccess / StageFailure"""

    def test_success_unwrap(self):
        assert StageSuccess(value=3).unwrap() == 3

    def test_failure_unwrap_raises(self):
        with pytest.raises(UpstreamError):
            StageFailure(error=UpstreamError("x", "media")).unwrap()

    def test_failure_attributed_to_step(self):
        failure = StageFailure(error=ValueError("x"), attempts=("a",)).at(PipelineStep.FETCHING_ASSETS)
        assert failure.step is PipelineStep.FETCHING_ASSETS
        assert failure.attempts == ("a",)
        assert failure.ok is False
