"""
Base use case class.

Each use case is one business operation, independent of HTTP. Routes turn
HTTP bodies into request objects, call ``execute`` and turn the result back
into a response.

Example:
    >>> class GenerateScriptUseCase(UseCase[ScriptRequest, ScriptResponse]):
    ...     async def execute(self, request: ScriptRequest) -> ScriptResponse:
    ...         ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            BookReelError subclasses for business failures. HTTP exceptions
            are the route's responsibility.
        """
