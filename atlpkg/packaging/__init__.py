"""Debian package assembly."""

from .assembler import DebAssembler, MockAssembler, PackageAssembler, deb_filename, render_control

__all__ = [
    "DebAssembler",
    "MockAssembler",
    "PackageAssembler",
    "deb_filename",
    "render_control",
]
