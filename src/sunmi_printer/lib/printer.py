"""
Sunmi Printer Library
=====================

Main entry point for working with the LAN printers reported by the Sunmi printer SDK.
It wires the event bus, the saved-printer registry and the use cases together and
exposes them as a single service.

Classes:
--------
- SunmiPrinter: Main entry point, owns the logger and the event bus.
- SunmiPrintersService: Saved-printer operations, SDK record ingestion and event hooks.

Usage:
------
- Instantiate `SunmiPrinter` using the `create` class method.
- Access the `printers` property for registry operations.
- Register callbacks for printer added, removed, connection and list update events.
"""

import logging
from typing import Any, Callable, Dict, List

from sunmi_printer.common.results import Result, ResultHandler
from sunmi_printer.common.utility import ColorFormatter, LoggerMixin
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)
from sunmi_printer.core.application.events.event_bus import EventBus
from sunmi_printer.core.application.events.printer_events import (
    PrinterAddedEvent,
    PrinterConnectionUpdatedEvent,
    PrinterRemovedEvent,
    PrintersUpdatedEvent,
)
from sunmi_printer.core.application.use_cases.printers_use_cases import (
    AddPrinterUseCase,
    GetPrinterByNameUseCase,
    GetPrintersUseCase,
    RemovePrinterUseCase,
    SetPrinterConnectionUseCase,
    TogglePrinterConnectionUseCase,
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
from sunmi_printer.infrastructure.memory.printers_adapter import (
    InMemoryPrintersAdapter,
)
from sunmi_printer.infrastructure.sdk.ip_printer_errors import (
    InvalidPrinterRawEntityError,
)
from sunmi_printer.infrastructure.sdk.ip_printer_serializers import (
    IpPrinterSerializer,
)


class SunmiPrinter(LoggerMixin):
    """
    Main entry point for the Sunmi Printer library.

    Args:
        logger (logging.Logger): Logger instance for logging.
        validate_printers (bool): Reject printers with an unusable address or port
            when they are saved. Defaults to False.
    """

    _event_bus: EventBus
    _printers_adapter: PrintersRepository
    _printers: "SunmiPrintersService"

    def __init__(
        self,
        *,
        logger: logging.Logger,
        validate_printers: bool = False,
    ) -> None:
        self._logger = logger
        self._event_bus = EventBus(logger=logger)
        self._printers_adapter = InMemoryPrintersAdapter(
            event_bus=self._event_bus, logger=logger
        )
        self._printers = SunmiPrintersService(
            printers_adapter=self._printers_adapter,
            event_bus=self._event_bus,
            logger=logger,
            validator=IpPrinterValidator() if validate_printers else None,
        )

    @property
    def printers(self) -> "SunmiPrintersService":
        """
        Access the service for saved-printer operations.

        Returns:
            SunmiPrintersService: Service for printer management.
        """
        return self._printers

    @classmethod
    def create(
        cls,
        *,
        log_level: int = logging.INFO,
        validate_printers: bool = False,
    ) -> "SunmiPrinter":
        """
        Create a SunmiPrinter instance with a configured logger.

        Args:
            log_level (int, optional): Logging level. Defaults to logging.INFO.
            validate_printers (bool, optional): Enable the address/port policy.
                Defaults to False.

        Returns:
            SunmiPrinter: Initialized instance.
        """
        logger = cls.build_logger(log_level=log_level)
        return cls(logger=logger, validate_printers=validate_printers)

    @staticmethod
    def build_logger(log_level: int = logging.INFO) -> logging.Logger:
        """
        Build and configure the library logger.

        Args:
            log_level (int, optional): Logging level. Defaults to logging.INFO.

        Returns:
            logging.Logger: Configured logger instance.
        """
        logger = logging.getLogger("SunmiPrinter")
        handler = logging.StreamHandler()
        formatter = ColorFormatter(
            "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
        )
        handler.setFormatter(formatter)

        if not logger.hasHandlers():
            logger.addHandler(handler)

        logger.setLevel(log_level)

        return logger

    def get_logger(self) -> logging.Logger:
        return self._logger


class SunmiPrintersService:
    """
    Service for the printers saved by the user.

    Provides registry operations, turns SDK printer records into entities, and
    registers callbacks for printer events.
    """

    def __init__(
        self,
        *,
        printers_adapter: PrintersRepository,
        event_bus: EventBus,
        logger: logging.Logger,
        validator: IpPrinterValidator | None = None,
    ) -> None:
        self._printers_adapter = printers_adapter
        self._event_bus = event_bus
        self._logger = logger
        self._validator = validator

    def get_printers(self) -> Result[List[MyPrinterEntity], None]:
        """
        Retrieve every saved printer in the order it was added.

        Returns:
            Result[List[MyPrinterEntity], None]: Saved printers.
        """
        return GetPrintersUseCase(
            printers_repository=self._printers_adapter, logger=self._logger
        ).execute()

    def get_printer_by_name(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Retrieve a saved printer by name.

        Args:
            name (str): Name of the printer.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: Saved entry or error.
        """
        return GetPrinterByNameUseCase(
            printers_repository=self._printers_adapter, logger=self._logger
        ).execute(name)

    def add_printer(
        self, printer: IpPrinterEntity
    ) -> Result[
        MyPrinterEntity,
        ApplicationPrintersErrors.PrinterAlreadyExistsError | PrinterValidationError,
    ]:
        """
        Save a printer. New entries start disconnected; a name that is already saved
        is rejected and the registry is left unchanged.

        Args:
            printer (IpPrinterEntity): The printer to save.

        Returns:
            Result[MyPrinterEntity, PrinterAlreadyExistsError | PrinterValidationError]:
                The new entry or error.
        """
        return AddPrinterUseCase(
            printers_repository=self._printers_adapter,
            logger=self._logger,
            validator=self._validator,
        ).execute(printer)

    def remove_printer(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Remove a saved printer by name.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: Removed entry or error.
        """
        return RemovePrinterUseCase(
            printers_repository=self._printers_adapter, logger=self._logger
        ).execute(name)

    def toggle_connection(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        """
        Flip the connection flag of a saved printer.

        Returns:
            Result[MyPrinterEntity, PrinterNotFoundError]: Updated entry or error.
        """
        return TogglePrinterConnectionUseCase(
            printers_repository=self._printers_adapter, logger=self._logger
        ).execute(name)

    def set_connection(
        self, name: str, is_connected: bool
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        return SetPrinterConnectionUseCase(
            printers_repository=self._printers_adapter, logger=self._logger
        ).execute(name, is_connected)

    def ingest_sdk_printers(
        self, raw_printers: List[Dict[str, Any]]
    ) -> Result[List[IpPrinterEntity], InvalidPrinterRawEntityError]:
        """
        Convert the printer records reported by the SDK and publish them as a
        PrintersUpdatedEvent. Nothing is published when a record is invalid.

        Args:
            raw_printers (List[Dict[str, Any]]): Raw SDK printer records.

        Returns:
            Result[List[IpPrinterEntity], InvalidPrinterRawEntityError]:
                The converted printers or the first conversion error.
        """
        result = IpPrinterSerializer.from_raw_list(raw_printers)

        if result.success == False:
            self._logger.warning(
                f"Failed to serialize SDK printers: {result.error.details}"
            )
            return result

        self._logger.debug(f"SDK reported {len(result.value)} printer(s)")
        self._event_bus.publish(PrintersUpdatedEvent(printers=result.value))
        return ResultHandler.ok(result.value)

    def on_printer_added(self, callback: Callable[[PrinterAddedEvent], None]) -> None:
        """
        Register a callback for printer added events.

        Args:
            callback (Callable[[PrinterAddedEvent], None]): Function to call on event.
        """
        self._event_bus.subscribe(PrinterAddedEvent, callback)

    def on_printer_removed(
        self, callback: Callable[[PrinterRemovedEvent], None]
    ) -> None:
        """
        Register a callback for printer removed events.
        """
        self._event_bus.subscribe(PrinterRemovedEvent, callback)

    def on_connection_update(
        self, callback: Callable[[PrinterConnectionUpdatedEvent], None]
    ) -> None:
        """
        Register a callback for connection flag changes.
        """
        self._event_bus.subscribe(PrinterConnectionUpdatedEvent, callback)

    def on_printers_updated(
        self, callback: Callable[[PrintersUpdatedEvent], None]
    ) -> None:
        """
        Register a callback for the printer lists reported by the SDK.
        """
        self._event_bus.subscribe(PrintersUpdatedEvent, callback)
