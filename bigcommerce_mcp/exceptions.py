"""BigCommerce MCP exceptions.

Every error raised while serving a tool call derives from
``BigCommerceMCPError`` so the protocol front-end can turn it into an
error-flagged tool result.
"""

from typing import Any


class BigCommerceMCPError(Exception):
    """Base class for all BigCommerce MCP errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Startup Errors
# ============================================================================


class ConfigurationError(BigCommerceMCPError):
    """Raised when required settings are missing or invalid.

    Fatal at startup: the server exits before serving any request.
    """


# ============================================================================
# Upstream Errors
# ============================================================================


class BigCommerceAPIError(BigCommerceMCPError):
    """Raised when BigCommerce answers with a non-2xx status.

    The body is kept as raw text because error bodies are not
    guaranteed to be valid JSON.
    """

    def __init__(self, status_code: int, status_text: str, body: str) -> None:
        """Initialize API error.

        Args:
            status_code: HTTP status code.
            status_text: HTTP reason phrase.
            body: Raw response body text.
        """
        super().__init__(
            message=f"BigCommerce API error: {status_code} {status_text} - {body}",
            details={
                "status_code": status_code,
                "status_text": status_text,
                "body": body,
            },
        )
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class BigCommerceRequestError(BigCommerceMCPError):
    """Raised when a request never got an HTTP response."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(
            message=f"BigCommerce request failed: {method} {url} - {reason}",
            details={"method": method, "url": url, "reason": reason},
        )
        self.method = method
        self.url = url
        self.reason = reason


# ============================================================================
# Tool Errors
# ============================================================================


class UnknownToolError(BigCommerceMCPError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            message=f"Unknown tool: {tool_name}",
            details={"tool": tool_name},
        )
        self.tool_name = tool_name


class ToolInputError(BigCommerceMCPError):
    """Raised when tool arguments do not match the tool's input schema."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]) -> None:
        """Initialize tool input error.

        Args:
            tool_name: Name of the tool that was called.
            errors: Validation errors as returned by pydantic's ``errors()``.
        """
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())) or 'arguments'}: "
            f"{error.get('msg', 'invalid value')}"
            for error in errors
        )
        super().__init__(
            message=f"Invalid arguments for {tool_name}: {problems}",
            details={"tool": tool_name, "errors": errors},
        )
        self.tool_name = tool_name
        self.errors = errors
