"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

from shared.domain.exceptions import DomainException

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """
    Result wrapper for use cases and the steps they orchestrate.

    A failed result carries the domain exception describing the abort so the
    caller can decide whether to roll back, translate or re-raise it.
    """
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    exception: Optional[DomainException] = None

    @classmethod
    def ok(cls, data: OutputDTO = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: str = None) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def fail_with(cls, exception: DomainException) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result from a domain exception."""
        return cls(
            success=False,
            error=exception.message,
            error_code=exception.code,
            exception=exception,
        )

    def unwrap(self) -> OutputDTO:
        """Return the data or raise the recorded exception."""
        if self.success:
            return self.data
        if self.exception is not None:
            raise self.exception
        raise DomainException(self.error or "Operation failed", self.error_code)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
