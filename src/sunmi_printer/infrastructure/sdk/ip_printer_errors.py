"""
Defines error classes for malformed printer records handed over by the native printer SDK.
"""

from typing import Any, Dict

from sunmi_printer.common.results import PrintersErrorCodes
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)


class InvalidPrinterRawEntityError(
    ApplicationPrintersErrors.PrinterError[
        PrintersErrorCodes.INVALID_PRINTER_RAW_ENTITY
    ],
):
    """
    Error returned when a raw SDK printer record cannot be turned into an IpPrinterEntity.

    Attributes:
        code (PrintersErrorCodes): INVALID_PRINTER_RAW_ENTITY.
        details (str): Message including the offending record.
    """

    code = PrintersErrorCodes.INVALID_PRINTER_RAW_ENTITY
    details: str

    def __init__(self, entity: Dict[str, Any]) -> None:
        self.details = f"Invalid printer raw entity format: {entity}"
