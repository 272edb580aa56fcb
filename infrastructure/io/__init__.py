"""I/O utilities: filesystem operations and context group XML files."""

from infrastructure.io.fs import read_utf8_text, require_file
from infrastructure.io.xml_files import (
    load_context_groups_file,
    read_xml_root,
    write_context_groups_file,
    write_xml,
)

__all__ = [
    "require_file",
    "read_utf8_text",
    "read_xml_root",
    "write_xml",
    "load_context_groups_file",
    "write_context_groups_file",
]
