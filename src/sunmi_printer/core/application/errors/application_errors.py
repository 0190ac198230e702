"""
Application Errors for Printer Operations
=========================================

Application-level error classes returned inside Result values by the printer
registry and the validation policy.
"""

from abc import ABC
from typing import Any, Generic, TypeVar

from sunmi_printer.common.results import BaseError, PrintersErrorCodes

PrintersErrorCode = TypeVar(
    "PrintersErrorCode", bound=PrintersErrorCodes, default=Any
)


class ApplicationPrintersErrors:
    class PrinterError(Generic[PrintersErrorCode], BaseError[str, PrintersErrorCode], ABC):
        """Base class for errors related to printer operations."""

    class PrinterNotFoundError(PrinterError[PrintersErrorCodes.PRINTER_NOT_FOUND]):
        """Error returned when no saved printer has the requested name."""

        code = PrintersErrorCodes.PRINTER_NOT_FOUND
        details: str

        def __init__(self, name: str) -> None:
            self.details = f"Printer with name {name!r} not found."

    class PrinterAlreadyExistsError(
        PrinterError[PrintersErrorCodes.PRINTER_ALREADY_EXISTS]
    ):
        """Error returned when a printer with the same name is already saved."""

        code = PrintersErrorCodes.PRINTER_ALREADY_EXISTS
        details: str

        def __init__(self, name: str) -> None:
            self.details = f"Printer with name {name!r} already exists."

    class InvalidPrinterAddressError(
        PrinterError[PrintersErrorCodes.INVALID_PRINTER_ADDRESS]
    ):
        """Error returned when a printer address is not an IP literal."""

        code = PrintersErrorCodes.INVALID_PRINTER_ADDRESS
        details: str

        def __init__(self, address: str) -> None:
            self.details = f"Invalid printer address: {address!r}"

    class InvalidPrinterPortError(PrinterError[PrintersErrorCodes.INVALID_PRINTER_PORT]):
        """Error returned when a printer port is outside the TCP port range."""

        code = PrintersErrorCodes.INVALID_PRINTER_PORT
        details: str

        def __init__(self, port: Any) -> None:
            self.details = f"Invalid printer port: {port!r}"
