from __future__ import annotations

import json
import re
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from .errors import EndOfInputError, UnexpectedEndOfInputError

JSON_WHITESPACE = " \t\r\n"

# Tail of a document that stops partway through a literal, number or \u escape.
_PARTIAL_TOKEN = re.compile(
    r"(?:t(?:r(?:ue?)?)?|f(?:a(?:l(?:se?)?)?)?|n(?:u(?:ll?)?)?"
    r"|-?(?:0|[1-9]\d*)?(?:\.\d*)?(?:[eE][-+]?\d*)?"
    r"|\\?u[0-9a-fA-F]{0,4})"
    r"[ \t\r\n]*"
)


def decode_json(content: bytes | str) -> Any:
    """Parse a response body.

    An empty body raises ``EndOfInputError`` and a truncated one raises
    ``UnexpectedEndOfInputError``; other syntax errors are raised as the
    plain ``json.JSONDecodeError``. Invalid UTF-8 is replaced, not rejected.
    """
    if isinstance(content, (bytes, bytearray)):
        text = content.decode("utf-8", errors="replace")
    else:
        text = content
    if not text.strip(JSON_WHITESPACE):
        raise EndOfInputError("EOF", text, len(text))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if _ran_out_of_input(e):
            raise UnexpectedEndOfInputError("unexpected EOF", e.doc, e.pos) from e
        raise


def _ran_out_of_input(e: json.JSONDecodeError) -> bool:
    if e.msg.startswith("Extra data"):
        return False
    if e.msg.startswith("Unterminated string"):
        return True
    return _PARTIAL_TOKEN.fullmatch(e.doc, e.pos) is not None


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode_into(content: bytes | str, into: Any) -> Any:
    data = decode_json(content)
    return _adapter(into).validate_python(data)
