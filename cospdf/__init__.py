"""Building blocks for PDF files at the COS object level: errors, containers, streams, cross-reference tables, nodes and objects."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "data",
    "diagnostics",
    "errors",
    "hash_dict",
    "log",
    "memory_stream",
    "nodes",
    "number",
    "objects",
    "objid",
    "ring_buffer",
    "stream_reader",
    "strings",
    "xref_entry",
    "xref_parser",
    "xref_table",
]