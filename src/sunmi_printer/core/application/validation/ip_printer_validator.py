"""
Opt-in address and port policy for IpPrinterEntity.

The entity itself never validates; callers that want to reject unusable printers
before saving them run this policy first.
"""

import ipaddress
from typing import Union

from sunmi_printer.common.results import Result, ResultHandler
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity

MIN_PORT = 1
MAX_PORT = 65535

PrinterValidationError = Union[
    ApplicationPrintersErrors.InvalidPrinterAddressError,
    ApplicationPrintersErrors.InvalidPrinterPortError,
]


class IpPrinterValidator:
    """
    Checks that a printer has an IPv4/IPv6 literal address and a TCP port in range.
    """

    @staticmethod
    def validate(
        printer: IpPrinterEntity,
    ) -> Result[IpPrinterEntity, PrinterValidationError]:
        """
        Validate the address and port of a printer. The address is checked first.

        Args:
            printer (IpPrinterEntity): The printer to check.
        Returns:
            Result[IpPrinterEntity, PrinterValidationError]:
                Success with the same printer, or the first failing check.
        """
        # ip_address() also accepts packed ints and bytes
        try:
            if not isinstance(printer.address, str):
                raise ValueError(printer.address)
            ipaddress.ip_address(printer.address)
        except ValueError:
            return ResultHandler.fail(
                ApplicationPrintersErrors.InvalidPrinterAddressError(printer.address)
            )

        port = printer.port
        if (
            isinstance(port, bool)
            or not isinstance(port, int)
            or not MIN_PORT <= port <= MAX_PORT
        ):
            return ResultHandler.fail(
                ApplicationPrintersErrors.InvalidPrinterPortError(port)
            )

        return ResultHandler.ok(printer)
