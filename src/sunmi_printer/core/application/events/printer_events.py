"""
Events published by the saved-printer registry and by SDK printer list ingestion.
"""

from dataclasses import dataclass
from typing import List

from sunmi_printer.core.application.events.base_event import BaseEvent
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.core.domain.entities.my_printer_entity import MyPrinterEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PrinterAddedEvent(BaseEvent):
    """
    Event triggered when a printer is saved to the registry.

    Attributes:
        printer (MyPrinterEntity): The saved printer, always disconnected.
    """

    printer: MyPrinterEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PrinterRemovedEvent(BaseEvent):
    """
    Event triggered when a printer is removed from the registry.

    Attributes:
        printer (MyPrinterEntity): The entry as it was before removal.
    """

    printer: MyPrinterEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PrinterConnectionUpdatedEvent(BaseEvent):
    """
    Event triggered when the connection flag of a saved printer changes.

    Attributes:
        printer (MyPrinterEntity): The entry carrying the new flag.
    """

    printer: MyPrinterEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PrintersUpdatedEvent(BaseEvent):
    """
    Event triggered when the SDK reports a new list of available printers.

    Attributes:
        printers (List[IpPrinterEntity]): Printers in the order the SDK reported them.
    """

    printers: List[IpPrinterEntity]
