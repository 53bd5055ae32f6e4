"""Integration tests: server construction and tool/resource consistency."""

from __future__ import annotations

import pytest
from mcp.server.lowlevel.server import NotificationOptions
from mcp.shared.memory import create_connected_server_and_client_session
from pydantic import AnyUrl

from acl_mcp_server import server as server_module
from acl_mcp_server.resources import SPECIFICATION_URI
from acl_mcp_server.server import INSTRUCTIONS, SERVER_NAME, create_server
from acl_mcp_server.spec_cache import SpecificationCache
from acl_mcp_server.tools import GET_SPECIFICATION_TOOL


class TestCreateServer:
    def test_name_and_instructions(self) -> None:
        mcp = create_server(SpecificationCache())
        assert mcp.name == SERVER_NAME
        assert mcp.instructions == INSTRUCTIONS
        assert "instructions://acl-specification" in INSTRUCTIONS
        assert "get_acl_specification" in INSTRUCTIONS

    def test_advertises_tools_and_resources(self) -> None:
        mcp = create_server(SpecificationCache())
        caps = mcp._mcp_server.get_capabilities(NotificationOptions(), {})
        assert caps.tools is not None
        assert caps.resources is not None

    def test_module_level_server(self) -> None:
        assert server_module.mcp.name == SERVER_NAME


class TestAdapterConsistency:
    @pytest.mark.asyncio
    async def test_tool_and_resource_match(self, spec_tree) -> None:
        mcp = create_server(SpecificationCache(start_dir=spec_tree))
        async with create_connected_server_and_client_session(mcp._mcp_server) as client:
            tool_result = await client.call_tool(GET_SPECIFICATION_TOOL, {})
            resource_result = await client.read_resource(AnyUrl(SPECIFICATION_URI))

        assert tool_result.content[0].text == resource_result.contents[0].text

    @pytest.mark.asyncio
    async def test_shared_cache_serves_loaded_text_after_file_change(self, spec_tree) -> None:
        spec_cache = SpecificationCache(start_dir=spec_tree)
        mcp = create_server(spec_cache)
        async with create_connected_server_and_client_session(mcp._mcp_server) as client:
            resource_result = await client.read_resource(AnyUrl(SPECIFICATION_URI))
            (spec_tree.parent.parent / "ACL.md").write_text("# Changed", encoding="utf-8")
            tool_result = await client.call_tool(GET_SPECIFICATION_TOOL, {})

        assert tool_result.content[0].text == resource_result.contents[0].text
        assert tool_result.content[0].text != "# Changed"

    @pytest.mark.asyncio
    async def test_bundled_spec_end_to_end(self) -> None:
        mcp = create_server()
        async with create_connected_server_and_client_session(mcp._mcp_server) as client:
            result = await client.call_tool(GET_SPECIFICATION_TOOL, {})

        assert result.isError is False
        text = result.content[0].text
        assert "Agent Communication Language (ACL)" in text
        assert "Language Specification" in text
        assert "## 1. Introduction" in text


class TestMain:
    def test_runs_over_stdio(self, monkeypatch) -> None:
        from unittest.mock import patch

        from acl_mcp_server import main

        monkeypatch.setenv("LOG_LEVEL", "debug")
        with patch.object(server_module.mcp, "run") as run:
            main()
        run.assert_called_once_with(transport="stdio")
