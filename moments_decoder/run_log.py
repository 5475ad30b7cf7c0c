from __future__ import annotations

import json
import traceback
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _truncate(text: str, *, limit: int) -> str:
    s = str(text or "")
    if len(s) <= limit:
        return s
    return s[: max(0, limit - 1)] + "…"


class RunLogger:
    """
    JSONL event log for one batch decode.

    Per-record events carry the input `line` at top level, along with either the
    skip `reason` or the decoded `content_type` and `tid`, so the log can be
    filtered without digging into `data`.
    """

    def __init__(self, fp: TextIO, *, session_id: str | None = None) -> None:
        self._fp = fp
        self._session_id = (session_id or "").strip() or uuid.uuid4().hex

    @classmethod
    def open(cls, path: str | Path, *, session_id: str | None = None) -> "RunLogger":
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        return cls(p.open("w", encoding="utf-8", newline="\n"), session_id=session_id)

    def close(self) -> None:
        if self._fp.closed:
            return
        try:
            self._fp.flush()
        finally:
            self._fp.close()

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def info(self, event: str, **data: Any) -> None:
        self._write("INFO", event, data)

    def record_decoded(self, line: int, *, content_type: str, tid: int) -> None:
        self._write("INFO", "record_decoded", {}, line=line, content_type=content_type, tid=tid)

    def record_skipped(self, line: int, *, reason: str) -> None:
        self._write("WARN", "record_skipped", {}, line=line, reason=reason)

    def exception(self, event: str, *, exc: BaseException, **data: Any) -> None:
        data["error"] = {
            "type": type(exc).__name__,
            "message": _truncate(str(exc), limit=2000),
            "traceback": _truncate(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
                limit=12000,
            ),
        }
        self._write("ERROR", event, data)

    def _write(self, level: str, event: str, data: dict[str, Any], **fields: Any) -> None:
        record: dict[str, Any] = {
            "ts": _utc_now_iso(),
            "level": level,
            "event": event,
            "session_id": self._session_id,
            **fields,
        }
        if data:
            record["data"] = data

        payload = json.dumps(
            record,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )
        self._fp.write(payload + "\n")
        self._fp.flush()
