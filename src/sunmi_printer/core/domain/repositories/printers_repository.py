"""
printers_repository.py

Defines the PrintersRepository abstract base class, the contract for the registry of
printers saved by the user. Printers are keyed by name.
"""

from abc import ABC, abstractmethod
from typing import List

from sunmi_printer.common.results import Result
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.core.domain.entities.my_printer_entity import MyPrinterEntity


class PrintersRepository(ABC):
    """
    Abstract base class for saved printer operations.

    All methods return a Result type to encapsulate success or error states.
    """

    @abstractmethod
    def get_printers(self) -> Result[List[MyPrinterEntity], None]:
        """
        Retrieve every saved printer in the order it was added.

        Returns:
            Result[List[MyPrinterEntity], None]: The saved printers.
        """
        ...

    @abstractmethod
    def get_printer_by_name(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Retrieve a saved printer by name.

        Args:
            name (str): Name of the printer.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]:
                The saved entry, or PrinterNotFoundError.
        """
        ...

    @abstractmethod
    def add_printer(
        self, printer: IpPrinterEntity
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterAlreadyExistsError]:
        """
        Save a printer, initially disconnected.

        Args:
            printer (IpPrinterEntity): The printer to save.

        Returns:
            Result[MyPrinterEntity, PrinterAlreadyExistsError]:
                The new entry, or PrinterAlreadyExistsError when the name is taken.
        """
        ...

    @abstractmethod
    def remove_printer(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Remove a saved printer by name.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: The removed entry.
        """
        ...

    @abstractmethod
    def toggle_connection(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Flip the connection flag of a saved printer.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: The updated entry.
        """
        ...

    @abstractmethod
    def set_connection(
        self, name: str, is_connected: bool
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Set the connection flag of a saved printer.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: The updated entry.
        """
        ...
