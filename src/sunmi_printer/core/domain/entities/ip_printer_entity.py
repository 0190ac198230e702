"""
Defines the IpPrinterEntity class, the network identity of a printer known to the client.
"""

from dataclasses import dataclass, field
from warnings import deprecated


@dataclass(kw_only=True)
class IpPrinterEntity:
    """
    Address, port and display name of a network printer.

    Every field is independently settable and nothing is validated here; see
    IpPrinterValidator for an opt-in address/port policy.

    Attributes:
        address (str): IP address literal of the printer.
        port (int): TCP port of the printer.
        name (str): Human-readable label.
        legacy_mode (str): Deprecated, kept for backward compatibility.
        legacy_serial_number (str): Deprecated, kept for backward compatibility.
    """

    address: str = ""
    port: int = 0
    name: str = ""
    _legacy_mode: str = field(default="", init=False, repr=False)
    _legacy_serial_number: str = field(default="", init=False, repr=False)

    @property
    @deprecated("IpPrinterEntity.legacy_mode is deprecated")
    def legacy_mode(self) -> str:
        return self._legacy_mode

    @legacy_mode.setter
    @deprecated("IpPrinterEntity.legacy_mode is deprecated")
    def legacy_mode(self, value: str) -> None:
        self._legacy_mode = value

    @property
    @deprecated("IpPrinterEntity.legacy_serial_number is deprecated")
    def legacy_serial_number(self) -> str:
        return self._legacy_serial_number

    @legacy_serial_number.setter
    @deprecated("IpPrinterEntity.legacy_serial_number is deprecated")
    def legacy_serial_number(self, value: str) -> None:
        self._legacy_serial_number = value
