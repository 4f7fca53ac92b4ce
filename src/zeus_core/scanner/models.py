"""Scanner data models — endpoints, parameters, and scan results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


class HttpMethod(enum.Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, text: str) -> HttpMethod | None:
        """Map a verb case-insensitively, or None if unsupported."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            return None


class ParameterType(enum.Enum):
    """Coarse parameter type inferred from a doc annotation."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Parameter:
    """A single documented parameter."""

    name: str
    type: ParameterType = ParameterType.UNKNOWN
    required: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.value, "required": self.required}


@dataclass(frozen=True)
class ResponseExample:
    """Documented response status with its example body."""

    status: int
    example: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "example": self.example}


@dataclass(frozen=True)
class Endpoint:
    """A single recognized route declaration."""

    method: HttpMethod
    path: str
    framework: str
    source_file: str
    description: str | None = None
    parameters: tuple[Parameter, ...] = ()
    request_body_schema: Any = None
    response: ResponseExample | None = None
    line: int | None = None

    @property
    def key(self) -> str:
        return f"{self.method.value} {self.path}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape.

        ``requestBodySchema`` and ``response`` are always present and null
        when absent; ``description`` and ``line`` are omitted when unset.
        """
        data: dict[str, Any] = {"method": self.method.value, "path": self.path}
        if self.description is not None:
            data["description"] = self.description
        data["parameters"] = [p.to_dict() for p in self.parameters]
        data["requestBodySchema"] = self.request_body_schema
        data["response"] = self.response.to_dict() if self.response else None
        data["framework"] = self.framework
        data["sourceFile"] = self.source_file
        if self.line is not None:
            data["line"] = self.line
        return data


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ScanResult:
    """Aggregate result of one scan."""

    root_dir: str
    endpoints: tuple[Endpoint, ...] = ()
    warnings: tuple[str, ...] = ()
    scanned_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scannedAt": self.scanned_at,
            "rootDir": self.root_dir,
            "endpoints": [e.to_dict() for e in self.endpoints],
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class PersistResult:
    """Outcome of writing a snapshot to disk."""

    output_path: str
    wrote_file: bool
    endpoints_written: int
    endpoints_unchanged: int
