"""
Defines the MyPrinterEntity class, a printer saved by the user together with its connection flag.
"""

from dataclasses import dataclass

from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity


@dataclass(frozen=True, kw_only=True)
class MyPrinterEntity:
    """
    A saved printer and whether it is currently marked as connected.

    Attributes:
        printer (IpPrinterEntity): The saved printer.
        is_connected (bool): Connection flag, False when the printer is first saved.
    """

    printer: IpPrinterEntity
    is_connected: bool = False

    @property
    def name(self) -> str:
        """Name of the saved printer, used as the registry key."""
        return self.printer.name
