from __future__ import annotations

from urllib.parse import quote_from_bytes, unquote_to_bytes


def percent_encode(text: str) -> str:
    """
    Percent-encode text as UTF-8, leaving only unreserved characters literal.

    Raises:
        UnicodeEncodeError: if text holds lone surrogates (undecodable bytes
            smuggled in through os.fsdecode).
    """
    return quote_from_bytes(text.encode("utf-8"), safe="")


def percent_decode(encoded: str) -> str:
    """
    Percent-decode a string and validate the result as strict UTF-8.

    Malformed escapes such as ``%zz`` are kept literally.

    Raises:
        UnicodeDecodeError: if the decoded bytes are not well-formed UTF-8.
    """
    return unquote_to_bytes(encoded).decode("utf-8")


def is_single_line_value(value: str) -> bool:
    """
    True if value can sit on one ``Key=Value`` line of a record.

    Rejects empty values, whitespace and other non-printable characters.
    """
    return bool(value) and all(ch.isprintable() and not ch.isspace() for ch in value)
