"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One application operation, driven by a request model.

    Use cases read the current time from a Clock and pass it down, so every
    decision below them is a pure function of stored state and `now`.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
