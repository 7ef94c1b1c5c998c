"""BigCommerce MCP Server.

Exposes BigCommerce store operations as MCP tools for AI agent
interaction. This is a thin adapter over the BigCommerce REST API,
served over stdio.

Required environment:
- BIGCOMMERCE_ACCESS_TOKEN - store API account access token
- BIGCOMMERCE_STORE_HASH - store hash
"""

import asyncio
import json
import logging
import sys
from typing import Any

import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from bigcommerce_mcp import __version__
from bigcommerce_mcp.api_client import BigCommerceAPIClient
from bigcommerce_mcp.catalog import list_tool_definitions
from bigcommerce_mcp.config import Settings, load_settings
from bigcommerce_mcp.exceptions import BigCommerceMCPError, ConfigurationError
from bigcommerce_mcp.tools import BigCommerceTools

SERVER_NAME = "bigcommerce-mcp"

logger = structlog.get_logger()


# ============================================================================
# Logging
# ============================================================================


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured JSON logging on stderr.

    stdout carries the MCP protocol stream and must stay clean.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# ============================================================================
# Tool Results
# ============================================================================


def success_result(result: Any) -> CallToolResult:
    """Wrap a tool result as pretty-printed JSON text."""
    return CallToolResult(
        content=[
            TextContent(
                type="text",
                text=json.dumps(result, indent=2, default=str, ensure_ascii=False),
            )
        ],
    )


def error_result(message: str) -> CallToolResult:
    """Wrap an error message as an error-flagged tool result."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


async def handle_call_tool(
    tools: BigCommerceTools,
    name: str,
    arguments: dict[str, Any] | None,
) -> CallToolResult:
    """Run a tool and wrap the outcome.

    Never raises: every failure becomes an error-flagged result.
    """
    logger.info("Tool called", tool=name, arguments=arguments)

    try:
        result = await tools.dispatch(name, arguments)
    except BigCommerceMCPError as e:
        logger.warning("Tool failed", tool=name, error=e.message)
        return error_result(e.message)
    except Exception as e:
        logger.exception("Tool execution failed", tool=name)
        return error_result(str(e))

    logger.info("Tool completed", tool=name)
    return success_result(result)


# ============================================================================
# MCP Server Implementation
# ============================================================================


def create_mcp_server(tools: BigCommerceTools) -> Server:
    """Create and configure the MCP server with all tools."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available MCP tools."""
        return list_tool_definitions()

    # Arguments are validated by the tool input models instead, so that
    # bad input takes the same "Error: " path as any other failure.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool invocation."""
        return await handle_call_tool(tools, name, arguments)

    return server


async def run_server(settings: Settings) -> None:
    """Run the MCP server using stdio transport."""
    api_client = BigCommerceAPIClient.from_settings(settings)
    tools = BigCommerceTools(api_client=api_client)
    server = create_mcp_server(tools)

    logger.info(
        "Starting BigCommerce MCP Server",
        store_hash=settings.bigcommerce_store_hash,
        api_host=settings.bigcommerce_api_host,
    )

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("BigCommerce MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await api_client.close()


def main() -> None:
    """Run the MCP server.

    Entry point for the MCP server. Exits with status 1 when the
    required configuration is missing, before any connection is made.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    asyncio.run(run_server(settings))


if __name__ == "__main__":
    main()
