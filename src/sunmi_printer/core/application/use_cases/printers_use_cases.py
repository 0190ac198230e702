"""
Use cases for the registry of printers saved by the user.

Each class wraps one repository operation, following the Command pattern with the
repository and logger injected by keyword.
"""

import logging
from typing import List, Optional, Union

from sunmi_printer.common.results import Result, ResultHandler
from sunmi_printer.common.utility import LoggerMixin
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)
from sunmi_printer.core.application.validation.ip_printer_validator import (
    IpPrinterValidator,
    PrinterValidationError,
)
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.core.domain.entities.my_printer_entity import MyPrinterEntity
from sunmi_printer.core.domain.repositories.printers_repository import (
    PrintersRepository,
)


class GetPrintersUseCase(LoggerMixin):
    """
    Use case for retrieving every saved printer.

    Args:
        printers_repository (PrintersRepository): Registry of saved printers.
        logger (logging.Logger): Logger instance for logging operations.
    """

    _printers_repository: PrintersRepository

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
    ) -> None:
        self._printers_repository = printers_repository
        self._build_logger(logger=logger)

    def execute(self) -> Result[List[MyPrinterEntity], None]:
        self._logger.debug("Executing GetPrintersUseCase.")
        return self._printers_repository.get_printers()


class GetPrinterByNameUseCase(LoggerMixin):
    """
    Use case for retrieving a saved printer by name.
    """

    _printers_repository: PrintersRepository

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
    ) -> None:
        self._printers_repository = printers_repository
        self._build_logger(logger=logger)

    def execute(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        self._logger.debug(f"Executing GetPrinterByNameUseCase with name: {name!r}")
        return self._printers_repository.get_printer_by_name(name)


class AddPrinterUseCase(LoggerMixin):
    """
    Use case for saving a printer.

    When a validator is given, printers with an unusable address or port are rejected
    before they reach the repository.

    Args:
        printers_repository (PrintersRepository): Registry of saved printers.
        logger (logging.Logger): Logger instance for logging operations.
        validator (Optional[IpPrinterValidator]): Address/port policy, None to skip.
    """

    _printers_repository: PrintersRepository
    _validator: Optional[IpPrinterValidator]

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
        validator: Optional[IpPrinterValidator] = None,
    ) -> None:
        self._printers_repository = printers_repository
        self._validator = validator
        self._build_logger(logger=logger)

    def execute(
        self, printer: IpPrinterEntity
    ) -> Result[
        MyPrinterEntity,
        Union[ApplicationPrintersErrors.PrinterAlreadyExistsError, PrinterValidationError],
    ]:
        self._logger.debug(f"Executing AddPrinterUseCase with name: {printer.name!r}")

        if self._validator is not None:
            validation = self._validator.validate(printer)
            if validation.success == False:
                self._logger.warning(
                    f"Rejected printer {printer.name!r}: {validation.error.details}"
                )
                return ResultHandler.fail(validation.error)

        return self._printers_repository.add_printer(printer)


class RemovePrinterUseCase(LoggerMixin):
    """
    Use case for removing a saved printer by name.
    """

    _printers_repository: PrintersRepository

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
    ) -> None:
        self._printers_repository = printers_repository
        self._build_logger(logger=logger)

    def execute(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        self._logger.debug(f"Executing RemovePrinterUseCase with name: {name!r}")
        return self._printers_repository.remove_printer(name)


class TogglePrinterConnectionUseCase(LoggerMixin):
    """
    Use case for flipping the connection flag of a saved printer.
    """

    _printers_repository: PrintersRepository

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
    ) -> None:
        self._printers_repository = printers_repository
        self._build_logger(logger=logger)

    def execute(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        self._logger.debug(
            f"Executing TogglePrinterConnectionUseCase with name: {name!r}"
        )
        return self._printers_repository.toggle_connection(name)


class SetPrinterConnectionUseCase(LoggerMixin):
    """
    Use case for setting the connection flag of a saved printer. Setting the flag it
    already has leaves the entry unchanged and publishes nothing.
    """

    _printers_repository: PrintersRepository

    def __init__(
        self,
        *,
        printers_repository: PrintersRepository,
        logger: logging.Logger,
    ) -> None:
        self._printers_repository = printers_repository
        self._build_logger(logger=logger)

    def execute(
        self, name: str, is_connected: bool
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        self._logger.debug(
            f"Executing SetPrinterConnectionUseCase with name: {name!r}, "
            f"is_connected: {is_connected}"
        )
        return self._printers_repository.set_connection(name, is_connected)
