"""MCP tool implementations: get_acl_specification and hello."""

from __future__ import annotations

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from acl_mcp_server.spec_cache import SpecificationCache

log = logging.getLogger("acl-mcp-server")

GET_SPECIFICATION_TOOL = "get_acl_specification"
GET_SPECIFICATION_ALIAS = "get_specification"
HELLO_TOOL = "hello"

GET_SPECIFICATION_TITLE = "Get ACL Specification"
GET_SPECIFICATION_DESCRIPTION = """
<Purpose>
Get the complete Agent Communication Language (ACL) specification document. ACL is a \
Domain-Specific Language (DSL) for concise, structured communication with AI agents in \
development workflows.
</Purpose>

<Use Cases>
- When the user asks about ACL syntax, commands, or usage (e.g., "How do I use ACL?", \
"What is begin()?")
- **When encountering ACL object methods like ACL.init(), ACL.load(), ACL.scan(), ACL.list()**
- When encountering ACL expressions like begin(), finish(), project.build(), spec.add(), \
session.summary()
- When questions involve CLAUDE.md, ACL Method Definitions, or project-specific command \
definitions
- When needing to understand workflow automation, knowledge management, or agent \
customization patterns
- When asked about obj, fn keywords, global functions, object methods, or chaining operators \
(&&, >, .then/.catch/.finally)
</Use Cases>

<Operational Notes>
- The specification includes: core syntax (scope.action(details)), global functions \
(begin, fix, test, etc.), built-in objects (ACL, project, session), declaration syntax \
(obj, fn), and common patterns
- **MUST** reference this when interpreting ACL commands to ensure correct behavior
- The specification is the authoritative source for ACL semantics and best practices
</Operational Notes>"""


def register_tools(mcp: FastMCP, spec_cache: SpecificationCache) -> None:
    """Register the specification tools (and their alias) plus ``hello`` on *mcp*.

    The specification tools read through *spec_cache* on every call. Load
    failures propagate, and FastMCP reports them to the caller as a tool error.
    """

    # ---------------------------------------------------------------------------
    # Tool 1: get_acl_specification
    # ---------------------------------------------------------------------------

    @mcp.tool(
        name=GET_SPECIFICATION_TOOL,
        title=GET_SPECIFICATION_TITLE,
        description=GET_SPECIFICATION_DESCRIPTION,
    )
    async def get_acl_specification() -> str:
        return await spec_cache.get()

    @mcp.tool(
        name=GET_SPECIFICATION_ALIAS,
        title=GET_SPECIFICATION_TITLE,
        description="Alias of get_acl_specification. Returns the full ACL specification.",
    )
    async def get_specification() -> str:
        return await spec_cache.get()

    # ---------------------------------------------------------------------------
    # Tool 2: hello
    # ---------------------------------------------------------------------------

    @mcp.tool(name=HELLO_TOOL, title="Hello Tool", description="Says hello")
    async def hello(
        name: Annotated[str, Field(description="The name to say hello to")],
    ) -> str:
        return greet(name)

    log.debug(
        "Registered tools: %s, %s, %s",
        GET_SPECIFICATION_TOOL,
        GET_SPECIFICATION_ALIAS,
        HELLO_TOOL,
    )


def greet(name: str) -> str:
    return f"Hello, {name}!"
