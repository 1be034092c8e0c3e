"""
Tests for tool and resource endpoint descriptors.
"""

import pytest

from users_mcp.domains.users import USER_RESOURCES, USER_TOOLS
from users_mcp.endpoints import (
    DEFAULT_RESOURCES,
    DEFAULT_TOOLS,
    ResourceEndpoint,
    ToolEndpoint,
    compile_uri_template,
)
from users_mcp.errors import ToolValidationError
from users_mcp.models import CreateUserInput


async def _noop_resource(store, uri, params):
    raise AssertionError("not called")


async def _noop_tool(store, arguments):
    raise AssertionError("not called")


# -----------------------------------------------------------------------------
# URI Templates
# -----------------------------------------------------------------------------


class TestUriTemplates:
    """Tests for placeholder matching."""

    def test_single_placeholder(self):
        pattern = compile_uri_template("users://{userId}/profile")
        assert pattern.fullmatch("users://42/profile").groupdict() == {"userId": "42"}

    def test_placeholder_is_one_segment(self):
        pattern = compile_uri_template("users://{userId}/profile")
        assert pattern.fullmatch("users://4/2/profile") is None

    def test_literal_parts_are_escaped(self):
        pattern = compile_uri_template("files://a.b/{name}")
        assert pattern.fullmatch("files://aXb/readme") is None
        assert pattern.fullmatch("files://a.b/readme").group("name") == "readme"

    def test_multiple_placeholders(self):
        pattern = compile_uri_template("orgs://{org}/users/{userId}")
        assert pattern.fullmatch("orgs://acme/users/7").groupdict() == {
            "org": "acme",
            "userId": "7",
        }


class TestResourceEndpoint:
    """Tests for resource matching and conversion."""

    def _endpoint(self, uri):
        return ResourceEndpoint(
            uri=uri,
            name="x",
            title="X",
            description="X resource",
            mime_type="application/json",
            handler=_noop_resource,
        )

    def test_fixed_uri_matches_exactly(self):
        endpoint = self._endpoint("users://all")
        assert not endpoint.is_template
        assert endpoint.match("users://all") == {}
        assert endpoint.match("users://all/") is None

    def test_template_match(self):
        endpoint = self._endpoint("users://{userId}/profile")
        assert endpoint.is_template
        assert endpoint.match("users://9/profile") == {"userId": "9"}
        assert endpoint.match("users://all") is None

    def test_to_mcp_template(self):
        template = self._endpoint("users://{userId}/profile").to_mcp_template()
        assert template.uriTemplate == "users://{userId}/profile"
        assert template.mimeType == "application/json"


# -----------------------------------------------------------------------------
# Tool Endpoints
# -----------------------------------------------------------------------------


class TestToolEndpoint:
    """Tests for argument validation and MCP conversion."""

    @pytest.fixture
    def endpoint(self):
        return ToolEndpoint(
            name="create-user",
            title="Create User",
            description="Create a user",
            input_model=CreateUserInput,
            handler=_noop_tool,
        )

    def test_validate_arguments_returns_model(self, endpoint):
        validated = endpoint.validate_arguments(
            {"name": "A", "email": "a@x.com", "address": "1 St", "phone": "555"}
        )
        assert isinstance(validated, CreateUserInput)

    def test_validate_arguments_lists_each_problem(self, endpoint):
        with pytest.raises(ToolValidationError) as exc_info:
            endpoint.validate_arguments({"name": 1})

        errors = exc_info.value.errors
        assert len(errors) == 4
        assert any(e.startswith("name:") for e in errors)
        assert exc_info.value.tool_name == "create-user"

    def test_to_mcp_tool_schema(self, endpoint):
        tool = endpoint.to_mcp_tool()

        assert set(tool.inputSchema.properties) == {"name", "email", "address", "phone"}
        assert tool.inputSchema.properties["email"]["type"] == "string"
        assert tool.outputSchema is None

    def test_default_annotations(self, endpoint):
        assert endpoint.to_mcp_tool().annotations.destructiveHint is True


# -----------------------------------------------------------------------------
# Users Domain
# -----------------------------------------------------------------------------


class TestUserEndpoints:
    """Tests for the registered users domain."""

    def test_defaults_are_users_domain(self):
        assert DEFAULT_TOOLS == USER_TOOLS
        assert DEFAULT_RESOURCES == USER_RESOURCES

    def test_create_user_hints(self):
        hints = USER_TOOLS[0].annotations
        assert (
            hints.idempotentHint,
            hints.readOnlyHint,
            hints.destructiveHint,
            hints.openWorldHint,
        ) == (False, False, False, True)

    def test_resource_addresses(self):
        assert [r.uri for r in USER_RESOURCES] == ["users://all", "users://{userId}/profile"]

    def test_all_endpoints_have_descriptions(self):
        for endpoint in [*USER_TOOLS, *USER_RESOURCES]:
            assert endpoint.description, f"{endpoint.name} missing description"
