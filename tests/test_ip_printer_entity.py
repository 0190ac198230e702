"""
Tests for the IpPrinterEntity descriptor.
"""

import warnings

import pytest

from sunmi_printer.core.domain.entities.ip_printer_entity import IpPrinterEntity


@pytest.mark.unit
class TestIpPrinterEntityDefaults:
    """A fresh descriptor exposes empty defaults."""

    def test_fresh_instance_has_empty_fields(self):
        printer = IpPrinterEntity()

        assert printer.address == ""
        assert printer.port == 0
        assert printer.name == ""

    def test_fresh_instance_has_empty_legacy_fields(self):
        printer = IpPrinterEntity()

        with pytest.deprecated_call():
            assert printer.legacy_mode == ""
        with pytest.deprecated_call():
            assert printer.legacy_serial_number == ""

    def test_fresh_instances_are_equal(self):
        assert IpPrinterEntity() == IpPrinterEntity()


@pytest.mark.unit
class TestIpPrinterEntityFields:
    """Get/set round trips without normalization."""

    def test_reference_scenario(self):
        printer = IpPrinterEntity()
        printer.address = "192.168.1.50"
        printer.port = 9100
        printer.name = "Front Counter Printer"

        assert printer.address == "192.168.1.50"
        assert printer.port == 9100
        assert printer.name == "Front Counter Printer"

    def test_keyword_construction(self, front_counter_printer):
        assert front_counter_printer.address == "192.168.1.50"
        assert front_counter_printer.port == 9100
        assert front_counter_printer.name == "Front Counter Printer"

    @pytest.mark.parametrize(
        "address",
        ["", "  192.168.1.50 ", "FE80::1", "not an address", "printer.local"],
    )
    def test_address_is_stored_verbatim(self, address):
        printer = IpPrinterEntity()
        printer.address = address

        assert printer.address == address

    @pytest.mark.parametrize("port", [0, -1, 65536, 70000, 9100])
    def test_port_is_not_range_checked(self, port):
        printer = IpPrinterEntity()
        printer.port = port

        assert printer.port == port

    def test_setting_name_leaves_other_fields_untouched(self, front_counter_printer):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            front_counter_printer.legacy_mode = "LAN"
            front_counter_printer.legacy_serial_number = "SN-1"

        front_counter_printer.name = "Back Office"

        assert front_counter_printer.name == "Back Office"
        assert front_counter_printer.address == "192.168.1.50"
        assert front_counter_printer.port == 9100
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            assert front_counter_printer.legacy_mode == "LAN"
            assert front_counter_printer.legacy_serial_number == "SN-1"

    def test_instances_do_not_share_state(self):
        first = IpPrinterEntity()
        second = IpPrinterEntity()

        first.name = "First"

        assert second.name == ""


@pytest.mark.unit
class TestIpPrinterEntityLegacyFields:
    """Deprecated fields keep working and carry a deprecation marker."""

    def test_legacy_mode_round_trip(self):
        printer = IpPrinterEntity()

        with pytest.deprecated_call():
            printer.legacy_mode = "LAN"
        with pytest.deprecated_call():
            assert printer.legacy_mode == "LAN"

    def test_legacy_serial_number_round_trip(self):
        printer = IpPrinterEntity()

        with pytest.deprecated_call():
            printer.legacy_serial_number = "N411P2A0001"
        with pytest.deprecated_call():
            assert printer.legacy_serial_number == "N411P2A0001"

    def test_legacy_fields_are_independent(self):
        printer = IpPrinterEntity(address="10.0.0.1", port=9100, name="A")

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            printer.legacy_mode = "mode"

            assert printer.legacy_serial_number == ""

        assert printer.address == "10.0.0.1"
        assert printer.port == 9100
        assert printer.name == "A"

    def test_legacy_accessors_are_marked_deprecated(self):
        legacy_mode = IpPrinterEntity.__dict__["legacy_mode"]
        legacy_serial_number = IpPrinterEntity.__dict__["legacy_serial_number"]

        assert legacy_mode.fget.__deprecated__
        assert legacy_mode.fset.__deprecated__
        assert legacy_serial_number.fget.__deprecated__
        assert legacy_serial_number.fset.__deprecated__

    def test_legacy_fields_are_hidden_from_repr(self):
        assert "legacy" not in repr(IpPrinterEntity())
