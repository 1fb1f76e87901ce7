"""Deterministic JSON encoding of wire records."""

from __future__ import annotations

import json

from stdoutlog.errors import EncodingError
from stdoutlog.exporter.wire import WireRecord


def encode(wire: WireRecord, pretty_print: bool = False) -> bytes:
    """
    Render a wire record as one newline-terminated UTF-8 JSON document.

    Compact output has no whitespace; pretty output indents with one tab per
    level and puts ``": "`` after keys.

    Raises:
        EncodingError: If a field cannot be represented as JSON
    """
    try:
        if pretty_print:
            text = json.dumps(
                wire.to_dict(),
                indent="\t",
                separators=(",", ": "),
                ensure_ascii=False,
                allow_nan=False,
            )
        else:
            text = json.dumps(
                wire.to_dict(),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
    except (TypeError, ValueError) as exc:
        raise EncodingError("failed to encode log record", {"cause": exc}) from exc
    return (text + "\n").encode("utf-8")
