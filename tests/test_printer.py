"""
Tests for the SunmiPrinter entry point and its printers service.
"""

import logging

import pytest

from sunmi_printer import IpPrinterEntity, SunmiPrinter
from sunmi_printer.common.results import PrintersErrorCodes, ResultHandler
from sunmi_printer.common.utility import ColorFormatter


@pytest.fixture
def sunmi(logger):
    return SunmiPrinter(logger=logger)


@pytest.mark.unit
class TestSunmiPrinterCreate:
    def test_create_builds_library_logger(self):
        sunmi = SunmiPrinter.create(log_level=logging.DEBUG)

        logger = sunmi.get_logger()
        assert logger.name == "SunmiPrinter"
        assert logger.level == logging.DEBUG

    def test_build_logger_attaches_one_color_handler(self, monkeypatch):
        library_logger = logging.getLogger("SunmiPrinter")
        monkeypatch.setattr(library_logger, "handlers", [])
        monkeypatch.setattr(library_logger, "propagate", False)

        first = SunmiPrinter.build_logger()
        second = SunmiPrinter.build_logger(log_level=logging.WARNING)

        assert first is second
        assert len(second.handlers) == 1
        assert isinstance(second.handlers[0].formatter, ColorFormatter)
        assert second.level == logging.WARNING

    def test_validation_disabled_by_default(self):
        sunmi = SunmiPrinter.create()

        result = sunmi.printers.add_printer(IpPrinterEntity(name="No Address"))

        assert ResultHandler.is_success(result)

    def test_validation_enabled(self):
        sunmi = SunmiPrinter.create(validate_printers=True)

        result = sunmi.printers.add_printer(IpPrinterEntity(name="No Address"))

        assert ResultHandler.is_error(result)
        assert result.error.code == PrintersErrorCodes.INVALID_PRINTER_ADDRESS


@pytest.mark.unit
class TestSunmiPrintersService:
    def test_registry_flow_with_callbacks(self, sunmi, front_counter_printer):
        added, removed, connection = [], [], []
        sunmi.printers.on_printer_added(added.append)
        sunmi.printers.on_printer_removed(removed.append)
        sunmi.printers.on_connection_update(connection.append)

        sunmi.printers.add_printer(front_counter_printer)
        sunmi.printers.toggle_connection(front_counter_printer.name)
        sunmi.printers.set_connection(front_counter_printer.name, False)
        sunmi.printers.remove_printer(front_counter_printer.name)

        assert [e.printer.name for e in added] == ["Front Counter Printer"]
        assert [e.printer.is_connected for e in connection] == [True, False]
        assert [e.printer.name for e in removed] == ["Front Counter Printer"]
        assert sunmi.printers.get_printers().value == []

    def test_get_printer_by_name(self, sunmi, front_counter_printer):
        sunmi.printers.add_printer(front_counter_printer)

        found = sunmi.printers.get_printer_by_name("Front Counter Printer")
        missing = sunmi.printers.get_printer_by_name("Missing")

        assert found.value.printer == front_counter_printer
        assert missing.error.code == PrintersErrorCodes.PRINTER_NOT_FOUND

    def test_duplicate_add(self, sunmi, front_counter_printer):
        sunmi.printers.add_printer(front_counter_printer)

        result = sunmi.printers.add_printer(front_counter_printer)

        assert result.error.code == PrintersErrorCodes.PRINTER_ALREADY_EXISTS

    def test_ingest_sdk_printers_publishes_update(self, sunmi, raw_sdk_printer):
        updates = []
        sunmi.printers.on_printers_updated(updates.append)

        result = sunmi.printers.ingest_sdk_printers([raw_sdk_printer])

        assert ResultHandler.is_success(result)
        assert len(updates) == 1
        assert updates[0].printers == result.value
        assert result.value[0].address == "10.0.0.23"

    def test_ingest_does_not_save_printers(self, sunmi, raw_sdk_printer):
        sunmi.printers.ingest_sdk_printers([raw_sdk_printer])

        assert sunmi.printers.get_printers().value == []

    def test_ingest_invalid_records_publishes_nothing(self, sunmi, raw_sdk_printer, caplog):
        updates = []
        sunmi.printers.on_printers_updated(updates.append)

        with caplog.at_level(logging.WARNING):
            result = sunmi.printers.ingest_sdk_printers(
                [raw_sdk_printer, {"deviceName": "broken"}]
            )

        assert ResultHandler.is_error(result)
        assert result.error.code == PrintersErrorCodes.INVALID_PRINTER_RAW_ENTITY
        assert updates == []
        assert "Failed to serialize SDK printers" in caplog.text

    def test_ingested_printer_can_be_saved(self, sunmi, raw_sdk_printer):
        printer = sunmi.printers.ingest_sdk_printers([raw_sdk_printer]).value[0]

        result = sunmi.printers.add_printer(printer)

        assert result.value.name == "NT311"
        assert result.value.is_connected is False
