import json

import pytest

from coolify_mcp.core.exceptions import CoolifyAPIError, ToolValidationError, UnknownToolError


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("name", "path"),
    [
        ("list-resources", "/resources"),
        ("list-applications", "/applications"),
        ("list-services", "/services"),
        ("list-databases", "/databases"),
        ("list-deployments", "/deployments"),
        ("get-version", "/version"),
        ("health-check", "/health"),
    ],
)
async def test_listing_tools_issue_fixed_get(dispatcher, fake_coolify, name, path):
    await dispatcher.dispatch(name, {})

    request = fake_coolify.last_request
    assert request.method == "GET"
    assert request.url.path == f"/api/v1{path}"
    assert request.url.query == b""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("name", "suffix"),
    [
        ("get-application", ""),
        ("start-application", "/start"),
        ("stop-application", "/stop"),
        ("restart-application", "/restart"),
    ],
)
async def test_uuid_tools_interpolate_path(dispatcher, fake_coolify, name, suffix):
    await dispatcher.dispatch(name, {"uuid": "app-1"})

    request = fake_coolify.last_request
    assert request.method == "GET"
    assert request.url.path == f"/api/v1/applications/app-1{suffix}"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["get-application", "start-application", "get-logs"])
@pytest.mark.parametrize("arguments", [{}, {"uuid": 123}, {"uuid": None}])
async def test_uuid_is_validated_before_network(dispatcher, fake_coolify, name, arguments):
    with pytest.raises(ToolValidationError) as excinfo:
        await dispatcher.dispatch(name, {**arguments, "type": "application"})

    assert excinfo.value.tool == name
    assert any(error["loc"] == ("uuid",) for error in excinfo.value.errors)
    assert str(excinfo.value).startswith("Invalid input: ")
    assert fake_coolify.requests == []


@pytest.mark.asyncio
async def test_update_application_patches_supplied_settings(dispatcher, fake_coolify):
    fake_coolify.respond(200, {"uuid": "app-1"})

    await dispatcher.dispatch(
        "update-application",
        {
            "uuid": "app-1",
            "settings": {
                "name": "web",
                "domain": "https://web.example.com",
                "health_check_enabled": True,
                "health_check_path": "/healthz",
            },
        },
    )

    request = fake_coolify.last_request
    assert request.method == "PATCH"
    assert request.url.path == "/api/v1/applications/app-1"
    assert json.loads(request.content) == {
        "name": "web",
        "domains": "https://web.example.com",
        "health_check_enabled": True,
        "health_check_path": "/healthz",
    }


@pytest.mark.asyncio
async def test_update_application_rejects_unknown_settings(dispatcher, fake_coolify):
    with pytest.raises(ToolValidationError):
        await dispatcher.dispatch(
            "update-application",
            {"uuid": "app-1", "settings": {"build_pack": "dockerfile"}},
        )

    assert fake_coolify.requests == []


@pytest.mark.asyncio
async def test_deploy_with_only_tag(dispatcher, fake_coolify):
    await dispatcher.dispatch("deploy", {"tag": "production"})

    params = fake_coolify.last_request.url.params
    assert fake_coolify.last_request.url.path == "/api/v1/deploy"
    assert params["tag"] == "production"
    assert "uuid" not in params
    assert "force" not in params


@pytest.mark.asyncio
async def test_deploy_with_only_force(dispatcher, fake_coolify):
    await dispatcher.dispatch("deploy", {"force": True})

    assert fake_coolify.last_request.url.query == b"force=true"


@pytest.mark.asyncio
async def test_deploy_omits_false_force_and_keeps_uuid_list(dispatcher, fake_coolify):
    await dispatcher.dispatch("deploy", {"uuid": "a,b", "force": False})

    assert dict(fake_coolify.last_request.url.params) == {"uuid": "a,b"}


@pytest.mark.asyncio
async def test_deploy_without_selectors_sends_no_query(dispatcher, fake_coolify):
    await dispatcher.dispatch("deploy", {})

    assert fake_coolify.last_request.url.query == b""


@pytest.mark.asyncio
async def test_application_logs_default_to_100_lines(dispatcher, fake_coolify):
    await dispatcher.dispatch("get-logs", {"uuid": "app-1", "type": "application"})

    request = fake_coolify.last_request
    assert request.url.path == "/api/v1/applications/app-1/logs"
    assert request.url.params["lines"] == "100"


@pytest.mark.asyncio
async def test_application_logs_forward_lines(dispatcher, fake_coolify):
    await dispatcher.dispatch("get-logs", {"uuid": "app-1", "type": "application", "lines": 25})

    assert fake_coolify.last_request.url.params["lines"] == "25"


@pytest.mark.asyncio
@pytest.mark.parametrize("lines", [5, 0, -5])
async def test_deployment_logs_ignore_lines(dispatcher, fake_coolify, lines):
    await dispatcher.dispatch("get-logs", {"uuid": "dep-1", "type": "deployment", "lines": lines})

    request = fake_coolify.last_request
    assert request.url.path == "/api/v1/deployments/dep-1"
    assert request.url.query == b""


@pytest.mark.asyncio
async def test_logs_type_is_restricted(dispatcher, fake_coolify):
    with pytest.raises(ToolValidationError) as excinfo:
        await dispatcher.dispatch("get-logs", {"uuid": "app-1", "type": "build"})

    assert excinfo.value.errors[0]["loc"] == ("type",)
    assert fake_coolify.requests == []


@pytest.mark.asyncio
async def test_unknown_tool_never_reaches_network(dispatcher, fake_coolify):
    with pytest.raises(UnknownToolError, match="Unknown tool: delete-everything"):
        await dispatcher.dispatch("delete-everything", {})

    assert fake_coolify.requests == []


@pytest.mark.asyncio
async def test_success_is_wrapped_in_single_text_block(dispatcher, fake_coolify):
    fake_coolify.respond(200, {"id": "abc"})

    content = await dispatcher.dispatch("get-application", {"uuid": "abc"})

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == '{\n  "id": "abc"\n}'
    assert json.loads(content[0].text) == {"id": "abc"}


@pytest.mark.asyncio
async def test_remote_error_surfaces_structured_payload(dispatcher, fake_coolify):
    fake_coolify.respond(404, {"message": "not found"})

    with pytest.raises(CoolifyAPIError) as excinfo:
        await dispatcher.dispatch("get-application", {"uuid": "missing"})

    payload = json.loads(str(excinfo.value))
    assert payload["status"] == 404
    assert payload["details"]["message"] == "not found"


@pytest.mark.asyncio
async def test_identical_calls_are_not_cached(dispatcher, fake_coolify):
    await dispatcher.dispatch("list-applications")
    await dispatcher.dispatch("list-applications")

    assert len(fake_coolify.requests) == 2


def test_unknown_arguments_are_dropped(dispatcher):
    call = dispatcher.resolve("get-application", {"uuid": "app-1", "verbose": True})

    assert call.path == "/applications/app-1"
    assert call.params is None
