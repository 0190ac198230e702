"""
sunmi_printer
=============

This package provides the main entry point for the Sunmi Printer library: the
IpPrinterEntity descriptor of a LAN printer and the services around it.

Re-exports:
------------
- All public classes and functions from `sunmi_printer.lib.printer`.

Usage:
------
Import from this package to access the API:

    from sunmi_printer import IpPrinterEntity, SunmiPrinter

See the documentation in `sunmi_printer.lib.printer` for details on available classes and methods.
"""

from sunmi_printer.lib.printer import *
