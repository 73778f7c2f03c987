"""Declarative endpoint specification data models"""

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal
from urllib.parse import quote, urlencode

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")

# Status codes an HTTP response can carry
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599


def freeze(value: Any) -> Any:
    """Recursively convert mappings to read-only mappings and lists to tuples"""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


FrozenMapping = Annotated[Mapping[str, Any], AfterValidator(freeze)]
FrozenHeaders = Annotated[Mapping[str, str], AfterValidator(freeze)]


class HTTPMethod(str, Enum):
    """HTTP request methods"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ParameterLocation(str, Enum):
    """Parameter location in request"""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"


class ParameterSpec(BaseModel):
    """A single endpoint parameter"""

    model_config = ConfigDict(frozen=True)

    name: str
    location: ParameterLocation
    required: bool = False
    json_schema: FrozenMapping = Field(default_factory=dict, validate_default=True)
    description: str | None = None
    default: Any | None = None

    @property
    def type(self) -> str:
        return self.json_schema.get("type", "string")


class StatusRange(BaseModel):
    """Matches status codes in the half-open range [start, stop)"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    start: int = 200
    stop: int = 300

    @model_validator(mode="after")
    def _check_bounds(self) -> "StatusRange":
        if self.start >= self.stop:
            raise ValueError(f"Empty status range [{self.start}, {self.stop})")
        return self

    def matches(self, status_code: int, body: Any = None) -> bool:
        return self.start <= status_code < self.stop


class OutsideStatusRange(BaseModel):
    """Matches status codes outside the half-open range [start, stop)"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["outside"] = "outside"
    start: int = 200
    stop: int = 300

    def matches(self, status_code: int, body: Any = None) -> bool:
        return status_code < self.start or status_code >= self.stop


class AnyStatus(BaseModel):
    """Matches every status code"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["any"] = "any"

    def matches(self, status_code: int, body: Any = None) -> bool:
        return True


StatusMatcher = Annotated[
    StatusRange | OutsideStatusRange | AnyStatus,
    Field(discriminator="kind"),
]


class ResponseSpec(BaseModel):
    """One named, ordered branch of the possible outcomes of an endpoint"""

    model_config = ConfigDict(frozen=True)

    match: StatusMatcher
    success: bool
    name: str
    description: str = ""
    body_schema: FrozenMapping = Field(default_factory=dict, validate_default=True)

    def matches(self, status_code: int, body: Any = None) -> bool:
        return self.match.matches(status_code, body)


class RequestBodySpec(BaseModel):
    """Request body description"""

    model_config = ConfigDict(frozen=True)

    json_schema: FrozenMapping = Field(default_factory=dict, validate_default=True)


class RequestSpec(BaseModel):
    """Static request headers and an optional body description"""

    model_config = ConfigDict(frozen=True)

    headers: FrozenHeaders = Field(default_factory=dict, validate_default=True)
    body: RequestBodySpec | None = None


class ExternalDocs(BaseModel):
    """Link to the upstream API documentation"""

    model_config = ConfigDict(frozen=True)

    url: str
    description: str = ""


class EndpointMetadata(BaseModel):
    """Descriptive endpoint metadata (diagnostic and display only)"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    display_title: str | None = None
    external_docs: ExternalDocs | None = None
    tags: tuple[str, ...] = ()


class EndpointSpec(BaseModel):
    """
    Immutable declarative description of one API operation.

    Invariants checked at construction:
    - parameter names are unique
    - every ``{name}`` placeholder in ``path`` has exactly one matching
      ``path`` parameter, and that parameter is required
    - every ``path`` parameter appears as a placeholder
    - no braces remain outside ``{name}`` placeholders

    Schemas and static headers are stored as read-only mappings.

    ``responses`` are ordered: the first matching response wins.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    method: HTTPMethod
    parameters: tuple[ParameterSpec, ...] = ()
    request: RequestSpec = Field(default_factory=RequestSpec)
    responses: tuple[ResponseSpec, ...] = ()
    metadata: EndpointMetadata = Field(default_factory=EndpointMetadata)
    security: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_path_parameters(self) -> "EndpointSpec":
        names = [param.name for param in self.parameters]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate parameter names: {', '.join(duplicates)}")

        leftover = PLACEHOLDER_PATTERN.sub("", self.path)
        if "{" in leftover or "}" in leftover:
            raise ValueError(f"Path '{self.path}' has an empty or unbalanced brace")

        placeholders = self.placeholders
        if len(set(placeholders)) != len(placeholders):
            raise ValueError(f"Path '{self.path}' repeats a placeholder")

        by_name = {param.name: param for param in self.parameters}
        for placeholder in placeholders:
            param = by_name.get(placeholder)
            if param is None or param.location != ParameterLocation.PATH:
                raise ValueError(
                    f"Placeholder '{{{placeholder}}}' in '{self.path}' has no path parameter"
                )
            if not param.required:
                raise ValueError(f"Path parameter '{placeholder}' must be required")

        for param in self.parameters:
            if param.location == ParameterLocation.PATH and param.name not in placeholders:
                raise ValueError(
                    f"Path parameter '{param.name}' does not appear in '{self.path}'"
                )
        return self

    @property
    def name(self) -> str:
        return self.metadata.name or f"{self.method.value} {self.path}"

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in the path template, in order of appearance"""
        return PLACEHOLDER_PATTERN.findall(self.path)

    def get_parameter(self, name: str) -> ParameterSpec | None:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def uncovered_status_codes(self) -> list[int]:
        """
        Status codes in [100, 599] that no response matches.

        Only the status code is considered; body-dependent matchers are
        evaluated with no body.
        """
        return [
            code
            for code in range(MIN_STATUS_CODE, MAX_STATUS_CODE + 1)
            if not any(response.matches(code) for response in self.responses)
        ]

    @property
    def is_exhaustive(self) -> bool:
        return not self.uncovered_status_codes()


class RequestInputs(BaseModel):
    """Caller-supplied parameter values and optional body for one call"""

    model_config = ConfigDict(frozen=True)

    # Keys are not restricted to str; the resolver reports them as unknown
    parameters: dict[Any, Any] = Field(default_factory=dict)
    body: Any | None = None

    @classmethod
    def coerce(cls, inputs: "RequestInputs | Mapping[str, Any] | None") -> "RequestInputs":
        """Accept RequestInputs, a mapping of parameter values, or nothing"""
        if inputs is None:
            return cls()
        if isinstance(inputs, RequestInputs):
            return inputs
        return cls(parameters=dict(inputs))


class ResolvedRequest(BaseModel):
    """A concrete request ready to be handed to a transport"""

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    path: str
    query: tuple[tuple[str, str], ...] = ()
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = None

    @property
    def query_string(self) -> str:
        return urlencode(self.query, quote_via=quote)

    @property
    def target(self) -> str:
        """Path plus query string"""
        if not self.query:
            return self.path
        return f"{self.path}?{self.query_string}"


class ClassifiedResponse(BaseModel):
    """The response descriptor selected for an observed status code and body"""

    model_config = ConfigDict(frozen=True)

    response: ResponseSpec
    status_code: int
    body: Any | None = None

    @property
    def success(self) -> bool:
        return self.response.success

    @property
    def name(self) -> str:
        return self.response.name


def success_response(
    body_schema: dict[str, Any] | None = None,
    name: str = "Success",
    description: str = "Typical success response",
) -> ResponseSpec:
    """Conventional 2xx success response"""
    return ResponseSpec(
        match=StatusRange(start=200, stop=300),
        success=True,
        name=name,
        description=description,
        body_schema=body_schema or {},
    )


def error_response(
    body_schema: dict[str, Any] | None = None,
    name: str = "Error",
    description: str = "Error response",
) -> ResponseSpec:
    """Conventional catch-all for every status code outside 2xx"""
    return ResponseSpec(
        match=OutsideStatusRange(start=200, stop=300),
        success=False,
        name=name,
        description=description,
        body_schema=body_schema or {},
    )
