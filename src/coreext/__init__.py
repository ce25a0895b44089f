"""
coreext: small helpers for builtin collections and values.

Each submodule groups the helpers for one kind of receiver:

- sequence: lists and tuples
- enumerable: any iterable
- mapping, mapping_convert, nested: dicts
- string: strings and JSON text
- records, ostruct: fixed-field and open records
- predicates: generated boolean accessors
- quotable: quoting of any value

Importing the package imports every group. Use
coreext.extensions.load_extensions to work with a subset.
"""

from coreext import (
    deep,
    enumerable,
    kernel,
    mapping,
    mapping_convert,
    nested,
    ostruct,
    predicates,
    presence,
    quotable,
    records,
    sequence,
    string,
)
from coreext.extensions import load_extensions

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "deep",
    "enumerable",
    "kernel",
    "load_extensions",
    "mapping",
    "mapping_convert",
    "nested",
    "ostruct",
    "predicates",
    "presence",
    "quotable",
    "records",
    "sequence",
    "string",
]
