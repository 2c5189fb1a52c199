# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from snipshare_executor.dispatcher import DispatcherAsync
from snipshare_executor.languages import supported_languages
from snipshare_executor.report import format_report
from snipshare_executor.templates import starter_template
from snipshare_executor.utils.logger import logger

# Initialize Dispatcher Logic
dispatcher = DispatcherAsync()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Closes the dispatcher's HTTP client when the server shuts down."""
    try:
        yield
    finally:
        await dispatcher.aclose()


# Initialize MCP Server
mcp = FastMCP("snipshare-executor", lifespan=lifespan)


@mcp.tool()  # type: ignore[misc]
async def run_code(language: str, code: str, stdin: str = "") -> list[TextContent]:
    """
    Run code on the remote execution service.
    Returns the execution report, including output or a diagnostic.
    """
    result = await dispatcher.dispatch(language, code, stdin)
    return [TextContent(type="text", text=format_report(result))]


@mcp.tool()  # type: ignore[misc]
async def list_languages() -> list[str]:
    """
    List the language ids that can be executed.
    """
    return supported_languages()


@mcp.tool()  # type: ignore[misc]
async def starter_code(language: str) -> str:
    """
    Return the starter program for a language.
    """
    template = starter_template(language)
    if not template:
        return f"Unsupported language: {language}"
    return template


def main() -> None:
    """Entry point for the MCP server."""
    logger.info("Starting snipshare-executor MCP server")
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
