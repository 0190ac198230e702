"""
Shared fixtures for the sunmi_printer tests.
"""

import logging

import pytest

from sunmi_printer.core.application.events.event_bus import EventBus
from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity
from sunmi_printer.infrastructure.memory.printers_adapter import (
    InMemoryPrintersAdapter,
)


@pytest.fixture
def logger():
    """Logger that propagates to the root logger so caplog sees every record."""
    test_logger = logging.getLogger("SunmiPrinterTests")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def event_bus(logger):
    return EventBus(logger=logger)


@pytest.fixture
def printers_adapter(event_bus, logger):
    return InMemoryPrintersAdapter(event_bus=event_bus, logger=logger)


@pytest.fixture
def front_counter_printer():
    """The printer from the reference scenario."""
    return IpPrinterEntity(
        address="192.168.1.50", port=9100, name="Front Counter Printer"
    )


@pytest.fixture
def kitchen_printer():
    return IpPrinterEntity(address="192.168.1.51", port=9100, name="Kitchen Printer")


@pytest.fixture
def raw_sdk_printer():
    """A LAN printer record as the native SDK reports it."""
    return {
        "deviceIP": "10.0.0.23",
        "devicePort": 9100,
        "deviceName": "NT311",
        "deviceMode": "LAN",
        "deviceSN": "N411P2A0001",
    }
