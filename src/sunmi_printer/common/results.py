"""
Generic result and error types shared by every layer of the library.
Operations that can fail in an expected way return a Result instead of raising.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, TypeGuard, TypeVar, Union

Details = TypeVar("Details")
S = TypeVar("S")
E = TypeVar("E")


class PrintersErrorCodes(Enum):
    """Enum for error codes related to printer operations."""

    PRINTER_NOT_FOUND = "printer_not_found"
    PRINTER_ALREADY_EXISTS = "printer_already_exists"
    INVALID_PRINTER_ADDRESS = "invalid_printer_address"
    INVALID_PRINTER_PORT = "invalid_printer_port"
    INVALID_PRINTER_RAW_ENTITY = "invalid_printer_raw_entity"


Code = TypeVar("Code", bound=PrintersErrorCodes)


class BaseError(ABC, Generic[Details, Code]):
    """Base class for all errors in the library."""

    code: Code
    details: Details

    def __init__(self, code: Code, details: Details) -> None:
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, details={self.details!r})"


@dataclass(frozen=True)
class Success(Generic[S]):
    """Represents a successful result."""

    value: S
    success: Literal[True] = True


@dataclass(frozen=True)
class Error(Generic[E]):
    """Represents an error result."""

    error: E
    success: Literal[False] = False


Result = Union[Success[S], Error[E]]


class ResultHandler:
    """Static helpers to build and inspect Result values."""

    @staticmethod
    def is_success(result: Result[S, E]) -> TypeGuard[Success[S]]:
        """Checks if the result is a success."""
        return isinstance(result, Success)

    @staticmethod
    def is_error(result: Result[S, E]) -> TypeGuard[Error[E]]:
        """Checks if the result is an error."""
        return isinstance(result, Error)

    @staticmethod
    def ok(value: S) -> Success[S]:
        """Creates a successful Result."""
        return Success(value)

    @staticmethod
    def fail(error: E) -> Error[E]:
        """Creates a failed Result."""
        return Error(error)
