from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Iterable, Iterator, Sequence

from .assemble import decode_post
from .post import Post

DEFAULT_PAYLOAD_FIELDS: tuple[str, ...] = ("content", "xml_content", "xml", "payload")


@dataclass(frozen=True)
class BatchOutcome:
    """One non-empty input line: either a decoded post or the reason it was skipped."""

    line: int
    post: Post | None = None
    skip_reason: str | None = None


def _coerce_payload(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    # JSON escapes can carry lone surrogates (truncated emoji) that UTF-8 output rejects.
    return value.encode("utf-8", errors="replace").decode("utf-8")


def payload_from_record(
    record: Any, *, payload_fields: Sequence[str] = DEFAULT_PAYLOAD_FIELDS
) -> str | None:
    """
    Find the raw payload inside one decoded JSON Lines record.

    A bare JSON string is the payload itself; for objects the first non-empty
    string among `payload_fields` wins.
    """
    if isinstance(record, str):
        return _coerce_payload(record)

    if isinstance(record, dict):
        for name in payload_fields:
            payload = _coerce_payload(record.get(name))
            if payload is not None:
                return payload

    return None


def decode_batch(
    lines: Iterable[str],
    *,
    tz: tzinfo | None = None,
    payload_fields: Sequence[str] = DEFAULT_PAYLOAD_FIELDS,
) -> Iterator[BatchOutcome]:
    """Decode a JSON Lines stream of payload records, preserving input order."""
    for lineno, text in enumerate(lines, start=1):
        if not text.strip():
            continue

        try:
            record = json.loads(text)
        except json.JSONDecodeError:
            yield BatchOutcome(line=lineno, skip_reason="invalid_json")
            continue

        payload = payload_from_record(record, payload_fields=payload_fields)
        if payload is None:
            yield BatchOutcome(line=lineno, skip_reason="missing_payload")
            continue

        yield BatchOutcome(line=lineno, post=decode_post(payload, tz=tz))
