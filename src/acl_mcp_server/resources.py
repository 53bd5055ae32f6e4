"""MCP resource exposing the ACL specification as readable Markdown."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from acl_mcp_server.spec_cache import SpecificationCache

SPECIFICATION_URI = "instructions://acl-specification"
SPECIFICATION_NAME = "ACL Specification for AI Agents"
SPECIFICATION_DESCRIPTION = (
    "Comprehensive specification for understanding and using Agent Communication "
    "Language (ACL) in development workflows"
)
SPECIFICATION_MIME_TYPE = "text/markdown"


def register_resources(mcp: FastMCP, spec_cache: SpecificationCache) -> None:
    """Register the specification resource on *mcp*, backed by *spec_cache*."""

    @mcp.resource(
        SPECIFICATION_URI,
        name=SPECIFICATION_NAME,
        description=SPECIFICATION_DESCRIPTION,
        mime_type=SPECIFICATION_MIME_TYPE,
    )
    async def acl_specification() -> str:
        return await spec_cache.get()
