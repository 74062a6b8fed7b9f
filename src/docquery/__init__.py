"""
docquery: path queries and escape decoding over JSON-like value trees.

This package uses a src-layout. Import the package as `docquery`.
"""

from importlib.metadata import version

__version__ = version("docquery")

from .config import DOCQUERY_CONFIG, DocQueryConfig
from .dsl import ROOT, PathRef
from .errors import (
    DocQueryError,
    InvalidUnicodeEscapeError,
    MalformedEscapeError,
    UnquoteError,
)
from .extract import extract_json
from .functions import extract, unquote
from .path import (
    ANY_INDEX,
    ANY_KEY,
    DOUBLE_WILDCARD,
    DoubleWildcardLeg,
    IndexLeg,
    KeyLeg,
    PathExpression,
    PathFlag,
    PathLeg,
)
from .runtime import configure_logging, get_logger
from .unquote import decode_escaped_unicode, unquote_string
from .validate import validate_expression
from .value import (
    NULL,
    ArrayValue,
    BooleanValue,
    DoubleValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
    from_python,
    get_sorted_keys,
    to_python,
    to_text,
)

__all__ = [
    "__version__",
    "ANY_INDEX",
    "ANY_KEY",
    "ArrayValue",
    "BooleanValue",
    "DOCQUERY_CONFIG",
    "DOUBLE_WILDCARD",
    "DocQueryConfig",
    "DocQueryError",
    "DoubleValue",
    "DoubleWildcardLeg",
    "IndexLeg",
    "IntegerValue",
    "InvalidUnicodeEscapeError",
    "KeyLeg",
    "MalformedEscapeError",
    "NULL",
    "NullValue",
    "ObjectValue",
    "PathExpression",
    "PathFlag",
    "PathLeg",
    "PathRef",
    "ROOT",
    "StringValue",
    "UnquoteError",
    "Value",
    "configure_logging",
    "decode_escaped_unicode",
    "extract",
    "extract_json",
    "from_python",
    "get_logger",
    "get_sorted_keys",
    "to_python",
    "to_text",
    "unquote",
    "unquote_string",
    "validate_expression",
]
