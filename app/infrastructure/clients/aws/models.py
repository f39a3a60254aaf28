"""Request, operation and endpoint models shared by the service clients."""

import json
from dataclasses import dataclass, field
from string import Formatter
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

_FORMATTER = Formatter()


class ServiceRequest(BaseModel):
    """Parameters for one service operation.

    Fields are the operation's member names (``ResourceArn``,
    ``ContactListName``, ...). Lookups match names case-insensitively, so
    ``imageBuildVersionArn`` satisfies ``ImageBuildVersionArn``. A field
    counts as set when the caller supplied it with a non-None value, which
    keeps "absent" apart from "default".

    Example:
        request = ServiceRequest(ResourceArn="arn:aws:...", Tags={"team": "sre"})
        request.has_been_set("ResourceArn")  # True
        request.has_been_set("TagKeys")  # False
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    # Fields forwarded to the endpoint provider as context parameters
    ENDPOINT_CONTEXT_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def _field_name(self, name: str) -> str:
        names = [*type(self).model_fields, *(self.model_extra or {})]
        return match_name(names, name) or name

    def has_been_set(self, name: str) -> bool:
        name = self._field_name(name)
        if name in type(self).model_fields:
            return name in self.model_fields_set and getattr(self, name) is not None
        return (self.model_extra or {}).get(name) is not None

    def to_params(self) -> Dict[str, Any]:
        """Explicitly set fields, keyed by the names the caller used."""
        params = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if self.has_been_set(name)
        }
        for name, value in (self.model_extra or {}).items():
            if value is not None:
                params[name] = value
        return params

    def endpoint_context_params(self) -> Dict[str, Any]:
        return {
            name: self.get(name)
            for name in self.ENDPOINT_CONTEXT_FIELDS
            if self.has_been_set(name)
        }

    def get(self, name: str, default: Any = None) -> Any:
        name = self._field_name(name)
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name, default)


@dataclass(frozen=True)
class OperationModel:
    """Static description of one API operation.

    Attributes:
        name: Operation name on the wire (e.g. "TagResource")
        http_method: Fixed HTTP verb
        path_template: Request path with ``{Field}`` placeholders
        required: Fields that must be set, checked in order
    """

    name: str
    http_method: str
    path_template: str
    required: Tuple[str, ...] = ()

    @property
    def path_fields(self) -> Tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in _FORMATTER.parse(self.path_template) if name
        )

    @property
    def checked_fields(self) -> Tuple[str, ...]:
        """Required fields followed by any path field not already listed."""
        extra = tuple(name for name in self.path_fields if name not in self.required)
        return self.required + extra

    def path_parts(self) -> List[Tuple[str, Optional[str]]]:
        """Template split into (literal, field) pairs in template order."""
        return [
            (literal, name)
            for literal, name, _, _ in _FORMATTER.parse(self.path_template)
        ]


@dataclass
class Endpoint:
    """Resolved endpoint: base URL plus the path built for one call."""

    base_url: str
    path_segments: List[str] = field(default_factory=list)
    trailing_slash: bool = False
    headers: Dict[str, str] = field(default_factory=dict)

    def add_path_segments(self, literal: str) -> None:
        """Append a literal path fragment, split on '/'."""
        self.path_segments.extend(part for part in literal.split("/") if part)
        self.trailing_slash = literal.endswith("/")

    def add_path_segment(self, value: Any) -> None:
        """Append one dynamic value, percent-encoded as a single segment."""
        self.path_segments.append(quote(_to_path_value(value), safe=""))
        self.trailing_slash = False

    @property
    def path(self) -> str:
        if not self.path_segments:
            return "/"
        path = "/" + "/".join(self.path_segments)
        return path + "/" if self.trailing_slash else path

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + self.path


def build_path(
    endpoint: Endpoint, operation: OperationModel, params: Mapping[str, Any]
) -> Endpoint:
    """Append the operation's path to a resolved endpoint."""
    for literal, name in operation.path_parts():
        if literal:
            endpoint.add_path_segments(literal)
        if name:
            endpoint.add_path_segment(params[match_name(params, name) or name])
    return endpoint


def match_name(names: Iterable[str], name: str) -> Optional[str]:
    """Return the entry of ``names`` equal to ``name``, ignoring case."""
    lowered = name.lower()
    fallback = None
    for candidate in names:
        if candidate == name:
            return candidate
        if fallback is None and candidate.lower() == lowered:
            fallback = candidate
    return fallback


def _to_path_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class HttpResponse:
    """Raw response returned by an HttpTransport.

    Header names are stored lower-cased.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def create(
        cls, status_code: int, headers: Mapping[str, str], body: Optional[bytes]
    ) -> "HttpResponse":
        return cls(
            status_code=status_code,
            headers={str(k).lower(): str(v) for k, v in headers.items()},
            body=body or b"",
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def json(self) -> Any:
        """Parsed JSON body; an empty body parses to an empty dict."""
        if not self.body.strip():
            return {}
        return json.loads(self.body)
