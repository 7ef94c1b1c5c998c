"""Tool catalog.

The fixed, ordered list of tools served by the BigCommerce MCP server.
Each entry pairs a tool name and description with the pydantic model
that validates its arguments and describes its parameters.
"""

from dataclasses import dataclass

from mcp.types import Tool
from pydantic import BaseModel

from bigcommerce_mcp.schemas import (
    CreateProductInput,
    GetOrderInput,
    GetProductInput,
    ListCustomersInput,
    ListOrdersInput,
    ListProductsInput,
    UpdateInventoryInput,
    UpdateProductInput,
)


@dataclass(frozen=True)
class ToolSpec:
    """Definition of a single MCP tool."""

    name: str
    description: str
    input_model: type[BaseModel]

    def to_tool(self) -> Tool:
        """Render as an MCP tool definition."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(),
        )


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="list_products",
        description="List products from BigCommerce catalog with filtering and pagination",
        input_model=ListProductsInput,
    ),
    ToolSpec(
        name="get_product",
        description="Get a specific product by ID with full details",
        input_model=GetProductInput,
    ),
    ToolSpec(
        name="create_product",
        description="Create a new product in BigCommerce catalog",
        input_model=CreateProductInput,
    ),
    ToolSpec(
        name="update_product",
        description=(
            "Update an existing product in BigCommerce. "
            "Only the fields provided are changed."
        ),
        input_model=UpdateProductInput,
    ),
    ToolSpec(
        name="list_orders",
        description="List orders from BigCommerce (V2 API)",
        input_model=ListOrdersInput,
    ),
    ToolSpec(
        name="get_order",
        description=(
            "Get a specific order by ID with full details. "
            "Order products and shipping addresses can be included "
            "(one extra call each)."
        ),
        input_model=GetOrderInput,
    ),
    ToolSpec(
        name="list_customers",
        description="List customers from BigCommerce",
        input_model=ListCustomersInput,
    ),
    ToolSpec(
        name="update_inventory",
        description="Update inventory level for a product or variant",
        input_model=UpdateInventoryInput,
    ),
)

TOOL_SPECS_BY_NAME: dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_SPECS}

_TOOLS: list[Tool] = [spec.to_tool() for spec in TOOL_SPECS]


def list_tool_definitions() -> list[Tool]:
    """Return the MCP tool definitions, in catalog order."""
    return list(_TOOLS)


def get_tool_spec(name: str) -> ToolSpec | None:
    """Look up a tool by name."""
    return TOOL_SPECS_BY_NAME.get(name)
