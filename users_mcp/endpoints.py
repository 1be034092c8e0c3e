"""
Endpoint definitions for the user-records MCP server.

This module contains the core descriptor types:
- ToolEndpoint: a named, invokable operation with an input model
- ResourceEndpoint: a read-only view addressed by URI or URI template

Concrete endpoints live in the domains/ package.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from .errors import ToolValidationError
from .models import (
    Resource,
    ResourceTemplate,
    TextResourceContents,
    Tool,
    ToolAnnotations,
    ToolCallResult,
    ToolInputSchema,
)

if TYPE_CHECKING:
    from .store import UserStore

ToolHandler = Callable[["UserStore", Any], Awaitable[ToolCallResult]]
ResourceHandler = Callable[["UserStore", str, dict[str, str]], Awaitable[TextResourceContents]]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def compile_uri_template(template: str) -> re.Pattern[str]:
    """
    Turn ``users://{userId}/profile`` into a regex with one named group per
    placeholder. A placeholder matches a single path segment.
    """
    pattern = ""
    pos = 0
    for match in _PLACEHOLDER.finditer(template):
        pattern += re.escape(template[pos : match.start()])
        pattern += f"(?P<{match.group(1)}>[^/]+)"
        pos = match.end()
    pattern += re.escape(template[pos:])
    return re.compile(pattern)


@dataclass
class ToolEndpoint:
    """
    Definition of an operation to expose as an MCP tool.

    - input_model: pydantic model the arguments must satisfy
    - output_model: optional model describing structuredContent
    - annotations: advisory hints, never enforced
    """

    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler
    output_model: type[BaseModel] | None = None
    annotations: ToolAnnotations = field(default_factory=ToolAnnotations)

    def validate_arguments(self, arguments: dict[str, Any]) -> BaseModel:
        """
        Validate arguments against this tool's input model.

        Raises:
            ToolValidationError: With one message per offending field.
        """
        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise ToolValidationError(self.name, errors) from e

    def to_mcp_tool(self) -> Tool:
        """Convert this endpoint definition to an MCP Tool."""
        schema = self.input_model.model_json_schema()
        return Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=ToolInputSchema(
                properties=schema.get("properties", {}),
                required=schema.get("required", []),
            ),
            outputSchema=(
                self.output_model.model_json_schema() if self.output_model else None
            ),
            annotations=self.annotations,
        )


@dataclass
class ResourceEndpoint:
    """
    Definition of a read-only resource.

    ``uri`` is either a fixed address (``users://all``) or a template with
    ``{name}`` placeholders (``users://{userId}/profile``).
    """

    uri: str
    name: str
    title: str
    description: str
    mime_type: str
    handler: ResourceHandler
    _pattern: re.Pattern[str] | None = field(default=None, init=False, repr=False)

    @property
    def is_template(self) -> bool:
        return bool(_PLACEHOLDER.search(self.uri))

    def match(self, uri: str) -> dict[str, str] | None:
        """Return extracted parameters if ``uri`` addresses this resource."""
        if not self.is_template:
            return {} if uri == self.uri else None
        if self._pattern is None:
            self._pattern = compile_uri_template(self.uri)
        found = self._pattern.fullmatch(uri)
        return found.groupdict() if found else None

    def to_mcp_resource(self) -> Resource:
        return Resource(
            uri=self.uri,
            name=self.name,
            title=self.title,
            description=self.description,
            mimeType=self.mime_type,
        )

    def to_mcp_template(self) -> ResourceTemplate:
        return ResourceTemplate(
            uriTemplate=self.uri,
            name=self.name,
            title=self.title,
            description=self.description,
            mimeType=self.mime_type,
        )


# -----------------------------------------------------------------------------
# Domain Endpoints (imported from isolated domain modules)
# -----------------------------------------------------------------------------

from .domains.users import USER_RESOURCES, USER_TOOLS  # noqa: E402

DEFAULT_TOOLS: list[ToolEndpoint] = USER_TOOLS
DEFAULT_RESOURCES: list[ResourceEndpoint] = USER_RESOURCES
