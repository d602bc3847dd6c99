# cospdf

`cospdf` is a small library of building blocks for PDF files at the object
level, which PDF calls the Carousel Object System (COS). It uses only the
standard library.

## What is in the package

- `cospdf.errors` defines `ErrorCode` and the exception hierarchy rooted at
  `CosError`. The subclasses are `InvalidArgumentError` (also a `ValueError`),
  `InvalidStateError`, `OutOfRangeError` (also an `IndexError`), `CosIOError`,
  `SyntaxCosError`, `ParseError` and `XrefError`. `error_for(code, message)`
  builds the exception that matches a code and returns `None` for
  `ErrorCode.NONE`. `raise_for(code, message)` raises that exception.
- `cospdf.objid.ObjID` is a frozen, ordered pair of an object number and a
  generation number. It provides `is_valid()`, which is true when the object
  number is above zero, and `compare()`, which returns -1, 0 or 1.
  `INVALID_OBJ_ID` is `ObjID(0, 0)`.
- `cospdf.number.Number` is a tagged value. Build it with
  `Number.integer`, which checks the 32-bit range, `Number.long_integer`,
  which checks the 64-bit range, or `Number.real`.
- `cospdf.data.Data` is a growable byte buffer that tracks its capacity.
  `cospdf.strings.TextBuffer` is the text counterpart. The same module also
  provides the helpers `compare_refs`, `strlcpy` and `strndup`.
- `cospdf.array.CallbackArray` is a list-like array. It calls the `retain`
  hook from `ArrayCallbacks` on items as they are inserted and the `release`
  hook on items as they are removed. `pop_last_item()` returns the item to the
  caller without releasing it.
- `cospdf.ring_buffer.RingBuffer` is a double-ended queue. Popping from an
  empty buffer raises `OutOfRangeError`.
- `cospdf.hash_dict.HashDict` is a mapping. It hashes and compares keys with
  the functions in `KeyCallbacks`, and it runs the retain and release hooks
  from `KeyCallbacks` and `ValueCallbacks`. `get()` returns `None` for a
  missing key.
- `cospdf.log.LogContext` formats messages printf-style. It passes a message
  to its log function only when the message level is at or below the context
  level. `get_default_log_context()` returns a shared context at `WARNING`
  level that writes to standard error.
- `cospdf.diagnostics.DiagnosticHandler` passes `Diagnostic` values to a
  handle function. `logger_handler(log_context)` returns a handler that sends
  errors and warnings to a log context. `get_default_handler()` returns one
  that uses the default log context.
- `cospdf.memory_stream.MemoryStream` is a seekable, writable byte stream in
  memory that can be used as a context manager.
  `cospdf.stream_reader.StreamReader` reads one byte at a time from any object
  that has `read` and `tell`, and provides `peek()` and a one-step `ungetc()`.
- The cross-reference modules are:
  - `cospdf.xref_entry`, which defines the entry types `FreeEntry`,
    `InUseEntry` and `CompressedEntry`.
  - `cospdf.xref_table`, which defines `XrefSubsection`, `XrefSection` and
    `XrefTable`. `XrefTable.find_entry_for_obj_num()` searches the sections in
    the order they were added.
  - `cospdf.xref_parser.XrefTableParser`, which reads classic tables: a
    subsection header such as `first count`, followed by 20-byte entries.
    Passing `strict=True` rejects entry numbers that are not zero-padded to
    their full width.
- `cospdf.nodes` defines a typed node tree: `Node`, with one `is_*` check per
  `NodeType`, plus `BoolNode`, `IntegerNode`, `IndirectNode` and `StreamNode`.
- `cospdf.objects` defines document objects: `NameObj`, `RealObj`,
  `ArrayObj`, `DictObj` and `StreamObj`. `StreamObj.filter_names()` reads the
  `Filter` entry of the stream dictionary. That entry may be a single name or
  an array of names. Array items that are not names are skipped.

## Installation

```
pip install cospdf
```

To install the test requirements as well:

```
pip install "cospdf[test]"
```

## Examples

Object identifiers:

```python
from cospdf.objid import ObjID

a = ObjID(12, 0)
b = ObjID(12, 1)
assert a.is_valid()
assert a.compare(b) == -1
```

Reading a cross-reference subsection from bytes:

```python
from cospdf.memory_stream import MemoryStream
from cospdf.xref_entry import FreeEntry, InUseEntry
from cospdf.xref_parser import XrefTableParser

stream = MemoryStream(
    b"0 2\n"
    b"0000000000 65535 f\r\n"
    b"0000000017 00000 n\r\n"
)
section = XrefTableParser(stream).parse_section()
subsection = section.get_subsection(0)
assert subsection.get_entry(0) == FreeEntry(0, 65535)
assert subsection.get_entry(1) == InUseEntry(17, 0)
```

Building objects:

```python
from cospdf.objects import ArrayObj, DictObj, NameObj, StreamObj

filters = ArrayObj([NameObj("ASCIIHexDecode"), NameObj("FlateDecode")])
stream_dict = DictObj({NameObj("Filter"): filters})
stream = StreamObj(stream_dict, b"789c")
assert stream.filter_names() == ["ASCIIHexDecode", "FlateDecode"]
assert stream.length == 4
```

Errors are raised as exceptions:

```python
from cospdf.errors import OutOfRangeError

try:
    filters.get_at(10)
except OutOfRangeError as exc:
    print("no such item:", exc)
```

## What the package does not do

`cospdf` does not open or load whole PDF documents. It has no tokenizer and no
parser for general objects, and it does not locate the `xref` keyword or read
the trailer. It does not decode stream data with filters:
`StreamObj.filter_names()` only reports which filters are named. It reads only
from in-memory streams. The package has no command-line program.

## Running the tests

```
pytest
```