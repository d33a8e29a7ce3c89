"""
Ordered provider fallback chains.

A chain holds named providers that all produce the same kind of value. They
are tried in order with the same arguments until one returns; failures are
logged and the next provider runs. Exceptions listed as ``fatal`` stop the
chain immediately.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Sequence, Tuple, Type, TypeVar, Union

from ...core.exceptions import AssetNotFoundError
from ...core.logging import get_logger
from .results import StageFailure, StageResult, StageSuccess

T = TypeVar("T")

logger = get_logger(__name__, component="fallback_chain")


@dataclass(frozen=True)
class Provider(Generic[T]):
    name: str
    call: Callable[..., Union[T, Awaitable[T]]]


class FallbackChain(Generic[T]):
    """Try each provider in order until one succeeds"""

    def __init__(
        self,
        name: str,
        providers: Sequence[Provider[T]],
        fatal: Tuple[Type[Exception], ...] = (),
    ):
        self.name = name
        self.providers = list(providers)
        self.fatal = fatal

    @property
    def provider_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.providers)

    async def run(self, *args: Any, **kwargs: Any) -> StageResult[T]:
        attempts = []
        last_error: Exception = AssetNotFoundError(f"No providers configured for {self.name}")

        for provider in self.providers:
            attempts.append(provider.name)
            try:
                result = provider.call(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
            except self.fatal as exc:
                logger.error(
                    f"{self.name}: {provider.name} failed fatally",
                    extra={"provider": provider.name, "error": str(exc)},
                )
                return StageFailure(error=exc, attempts=tuple(attempts))
            except Exception as exc:
                logger.warning(
                    f"{self.name}: {provider.name} failed, trying next provider",
                    extra={"provider": provider.name, "error": str(exc)},
                )
                last_error = exc
                continue

            if len(attempts) > 1:
                logger.info(
                    f"{self.name}: served by fallback provider {provider.name}",
                    extra={"attempts": attempts},
                )
            return StageSuccess(value=result, source=provider.name)

        return StageFailure(error=last_error, attempts=tuple(attempts))
