"""
Serializers for converting raw printer records from the native printer SDK into domain entities.

The SDK reports LAN printers with the attribute names of its own model class
(deviceIP, devicePort, deviceName, deviceMode, deviceSN). This module only maps those
names onto IpPrinterEntity; address and port values are copied as they are.
"""

import warnings
from typing import Any, Dict, List

from sunmi_printer.common.results import Result, ResultHandler
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.infrastructure.sdk.ip_printer_errors import (
    InvalidPrinterRawEntityError,
)


class IpPrinterSerializer:
    """
    Serializer class for converting raw SDK printer records into IpPrinterEntity objects.
    """

    @staticmethod
    def _parse_port(raw_port: Any) -> int | None:
        # bool is an int subclass but never a port
        if isinstance(raw_port, bool):
            return None
        if isinstance(raw_port, int):
            return raw_port
        if isinstance(raw_port, float) and raw_port.is_integer():
            return int(raw_port)
        if isinstance(raw_port, str):
            try:
                return int(raw_port.strip())
            except ValueError:
                return None
        return None

    @staticmethod
    def from_raw(
        raw_printer: Dict[str, Any],
    ) -> Result[IpPrinterEntity, InvalidPrinterRawEntityError]:
        """
        Converts a raw SDK printer record to an IpPrinterEntity.

        deviceIP, devicePort and deviceName are required; deviceIP and deviceName must be
        strings. devicePort may arrive as an int, an integral float or a numeric string. The deprecated deviceMode and
        deviceSN attributes are carried over when present.

        Args:
            raw_printer (Dict[str, Any]): The raw printer record.
        Returns:
            Result[IpPrinterEntity, InvalidPrinterRawEntityError]:
                Success with IpPrinterEntity or failure with InvalidPrinterRawEntityError.
        """
        required_fields = ["deviceIP", "devicePort", "deviceName"]

        for field in required_fields:
            if field not in raw_printer:
                return ResultHandler.fail(InvalidPrinterRawEntityError(raw_printer))

        for field in ("deviceIP", "deviceName"):
            if not isinstance(raw_printer[field], str):
                return ResultHandler.fail(InvalidPrinterRawEntityError(raw_printer))

        port = IpPrinterSerializer._parse_port(raw_printer["devicePort"])

        if port is None:
            return ResultHandler.fail(InvalidPrinterRawEntityError(raw_printer))

        printer = IpPrinterEntity(
            address=raw_printer["deviceIP"],
            port=port,
            name=raw_printer["deviceName"],
        )

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            printer.legacy_mode = str(raw_printer.get("deviceMode") or "")
            printer.legacy_serial_number = str(raw_printer.get("deviceSN") or "")

        return ResultHandler.ok(printer)

    @staticmethod
    def from_raw_list(
        raw_printers: List[Dict[str, Any]],
    ) -> Result[List[IpPrinterEntity], InvalidPrinterRawEntityError]:
        """
        Converts a list of raw SDK printer records to IpPrinterEntity objects.
        Fails on the first invalid record.

        Args:
            raw_printers (List[Dict[str, Any]]): List of raw printer records.
        Returns:
            Result[List[IpPrinterEntity], InvalidPrinterRawEntityError]:
                Success with the entities or failure with InvalidPrinterRawEntityError.
        """
        entities: List[IpPrinterEntity] = []

        for raw_printer in raw_printers:
            result = IpPrinterSerializer.from_raw(raw_printer)
            if result.success == False:
                return ResultHandler.fail(result.error)
            entities.append(result.value)

        return ResultHandler.ok(entities)
