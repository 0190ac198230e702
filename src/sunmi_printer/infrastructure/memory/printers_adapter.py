"""
In-memory implementation of the PrintersRepository interface.

Keeps a snapshot of each printer saved by the user for the lifetime of the process and
publishes an event on the EventBus after every change.
"""

import copy
import dataclasses
import logging
from typing import Dict, List

from sunmi_printer.common.results import Result, ResultHandler
from sunmi_printer.common.utility import LoggerMixin
from sunmi_printer.core.application.errors.application_errors import (
    ApplicationPrintersErrors,
)
from sunmi_printer.core.application.events.event_bus import EventBus
from sunmi_printer.core.application.events.printer_events import (
    PrinterAddedEvent,
    PrinterConnectionUpdatedEvent,
    PrinterRemovedEvent,
)
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.core.domain.entities.my_printer_entity import MyPrinterEntity
from sunmi_printer.core.domain.repositories.printers_repository import (
    PrintersRepository,
)


class InMemoryPrintersAdapter(PrintersRepository, LoggerMixin):
    """
    Registry of saved printers keyed by printer name.

    Not thread-safe; callers sharing an instance across threads must lock around it.
    """

    _printers: Dict[str, MyPrinterEntity]
    _event_bus: EventBus

    def __init__(self, *, event_bus: EventBus, logger: logging.Logger) -> None:
        """
        Initialize an empty registry.

        Args:
            event_bus (EventBus): Bus receiving the registry events.
            logger (logging.Logger): Logger instance for logging.
        """
        self._printers = {}
        self._event_bus = event_bus
        self._build_logger(logger=logger)

    def get_printers(self) -> Result[List[MyPrinterEntity], None]:
        return ResultHandler.ok(list(self._printers.values()))

    def get_printer_by_name(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        my_printer = self._printers.get(name)

        if my_printer is None:
            return ResultHandler.fail(ApplicationPrintersErrors.PrinterNotFoundError(name))

        return ResultHandler.ok(my_printer)

    def add_printer(
        self, printer: IpPrinterEntity
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterAlreadyExistsError]:
        if printer.name in self._printers:
            self._logger.warning(f"Printer {printer.name!r} is already saved")
            return ResultHandler.fail(
                ApplicationPrintersErrors.PrinterAlreadyExistsError(printer.name)
            )

        # snapshot so later edits by the caller cannot re-key or duplicate the entry
        my_printer = MyPrinterEntity(printer=copy.copy(printer), is_connected=False)
        self._printers[printer.name] = my_printer
        self._logger.info(
            f"Saved printer {printer.name!r} at {printer.address}:{printer.port}"
        )

        self._event_bus.publish(PrinterAddedEvent(printer=my_printer))
        return ResultHandler.ok(my_printer)

    def remove_printer(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        my_printer = self._printers.pop(name, None)

        if my_printer is None:
            self._logger.warning(f"Cannot remove unknown printer {name!r}")
            return ResultHandler.fail(ApplicationPrintersErrors.PrinterNotFoundError(name))

        self._logger.info(f"Removed printer {name!r}")

        self._event_bus.publish(PrinterRemovedEvent(printer=my_printer))
        return ResultHandler.ok(my_printer)

    def toggle_connection(
        self, name: str
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        my_printer = self._printers.get(name)

        if my_printer is None:
            self._logger.warning(f"Cannot toggle connection of unknown printer {name!r}")
            return ResultHandler.fail(ApplicationPrintersErrors.PrinterNotFoundError(name))

        return self._update_connection(name, my_printer, not my_printer.is_connected)

    def set_connection(
        self, name: str, is_connected: bool
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        my_printer = self._printers.get(name)

        if my_printer is None:
            self._logger.warning(f"Cannot set connection of unknown printer {name!r}")
            return ResultHandler.fail(ApplicationPrintersErrors.PrinterNotFoundError(name))

        return self._update_connection(name, my_printer, is_connected)

    def _update_connection(
        self, name: str, my_printer: MyPrinterEntity, is_connected: bool
    ) -> Result[MyPrinterEntity, ApplicationPrintersErrors.PrinterNotFoundError]:
        if my_printer.is_connected == is_connected:
            return ResultHandler.ok(my_printer)

        updated = dataclasses.replace(my_printer, is_connected=is_connected)
        self._printers[name] = updated
        self._logger.info(
            f"Printer {name!r} is now "
            f"{'connected' if is_connected else 'disconnected'}"
        )

        self._event_bus.publish(PrinterConnectionUpdatedEvent(printer=updated))
        return ResultHandler.ok(updated)
