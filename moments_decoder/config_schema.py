from __future__ import annotations

from typing import Annotated, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

NonNegativeInt = Annotated[int, Field(ge=0)]


def _normalize_field_list(values: list[str]) -> list[str]:
    out: list[str] = []
    seen: set[str] = set()

    for item in values:
        name = (item or "").strip()
        if not name or name in seen:
            continue
        seen.add(name)
        out.append(name)

    if not out:
        raise ValueError("must contain at least one non-empty field name")
    return out


class DisplayConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    timezone: str | None = None  # None formats in host local time

    @field_validator("timezone")
    @classmethod
    def _timezone_must_exist(cls, v: str | None) -> str | None:
        if v is None:
            return None
        name = v.strip()
        if not name:
            return None
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, OSError, ValueError) as e:
            raise ValueError(f"unknown time zone: {name}") from e
        return name


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    format: Literal["json", "text"] = "json"
    indent: NonNegativeInt = 2
    include_raw: bool = False


class BatchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    payload_fields: list[str] = Field(
        default_factory=lambda: ["content", "xml_content", "xml", "payload"]
    )

    @field_validator("payload_fields")
    @classmethod
    def _normalize_payload_fields(cls, v: list[str]) -> list[str]:
        return _normalize_field_list(v)


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
