"""MCP Tools for BigCommerce.

Defines the 8 MCP tools as thin adapters over the BigCommerce REST API:
1. list_products - GET v3 /catalog/products
2. get_product - GET v3 /catalog/products/{id}
3. create_product - POST v3 /catalog/products
4. update_product - PUT v3 /catalog/products/{id}
5. list_orders - GET v2 /orders
6. get_order - GET v2 /orders/{id} (+ products, shipping addresses)
7. list_customers - GET v3 /customers
8. update_inventory - PUT v3 product or variant

Handlers return whatever BigCommerce returns; errors propagate to the
protocol front-end.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from bigcommerce_mcp.api_client import BigCommerceAPIClient
from bigcommerce_mcp.catalog import get_tool_spec
from bigcommerce_mcp.exceptions import ToolInputError, UnknownToolError
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

logger = structlog.get_logger()

ToolHandler = Callable[[Any], Awaitable[Any]]


def format_query_value(value: Any) -> str:
    """Format a value for a BigCommerce query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(
    input_data: BaseModel,
    exclude: set[str] | None = None,
) -> dict[str, str]:
    """Build query parameters from provided fields, using filter aliases."""
    data = input_data.model_dump(by_alias=True, exclude_none=True, exclude=exclude)
    return {key: format_query_value(value) for key, value in data.items()}


def build_body(
    input_data: BaseModel,
    exclude: set[str] | None = None,
) -> dict[str, Any]:
    """Build a JSON body from provided fields."""
    return input_data.model_dump(exclude_none=True, exclude=exclude)


class BigCommerceTools:
    """MCP Tools for BigCommerce.

    Provides one handler per tool and a name-keyed dispatch table.
    Each handler takes the tool's validated input model.
    """

    def __init__(self, api_client: BigCommerceAPIClient) -> None:
        """Initialize MCP tools.

        Args:
            api_client: BigCommerce API client.
        """
        self.api = api_client
        self.handlers: dict[str, ToolHandler] = {
            "list_products": self.list_products,
            "get_product": self.get_product,
            "create_product": self.create_product,
            "update_product": self.update_product,
            "list_orders": self.list_orders,
            "get_order": self.get_order,
            "list_customers": self.list_customers,
            "update_inventory": self.update_inventory,
        }

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> Any:
        """Validate arguments and run the named tool.

        Args:
            name: Tool name.
            arguments: Raw tool arguments; None is treated as empty.

        Returns:
            The tool result, ready for JSON serialization.

        Raises:
            UnknownToolError: If the tool is not in the catalog.
            ToolInputError: If the arguments fail validation.
        """
        spec = get_tool_spec(name)
        handler = self.handlers.get(name)
        if spec is None or handler is None:
            raise UnknownToolError(name)

        try:
            input_data = spec.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolInputError(name, e.errors(include_url=False)) from e

        return await handler(input_data)

    # =========================================================================
    # Products
    # =========================================================================

    async def list_products(self, input_data: ListProductsInput) -> Any:
        """List catalog products.

        ``name`` filters with ``name:like`` and ``categories`` with
        ``categories:in``; other filters pass through.
        """
        params = build_query(input_data)
        logger.info("Listing products", params=params)
        return await self.api.get_v3("/catalog/products", params)

    async def get_product(self, input_data: GetProductInput) -> Any:
        """Get a product by ID."""
        logger.info("Getting product", product_id=input_data.product_id)
        return await self.api.get_v3(
            f"/catalog/products/{input_data.product_id}",
            build_query(input_data, exclude={"product_id"}),
        )

    async def create_product(self, input_data: CreateProductInput) -> Any:
        """Create a catalog product.

        Name, type, weight and price are always sent; optional fields
        only when provided.
        """
        logger.info("Creating product", name=input_data.name, type=input_data.type)
        return await self.api.post_v3("/catalog/products", build_body(input_data))

    async def update_product(self, input_data: UpdateProductInput) -> Any:
        """Partially update a product."""
        data = build_body(input_data, exclude={"product_id"})
        logger.info(
            "Updating product",
            product_id=input_data.product_id,
            fields=sorted(data),
        )
        return await self.api.put_v3(f"/catalog/products/{input_data.product_id}", data)

    # =========================================================================
    # Orders
    # =========================================================================

    async def list_orders(self, input_data: ListOrdersInput) -> Any:
        """List orders from the v2 API."""
        params = build_query(input_data)
        logger.info("Listing orders", params=params)
        return await self.api.get_v2("/orders", params)

    async def get_order(self, input_data: GetOrderInput) -> dict[str, Any]:
        """Get an order, optionally with its products and shipping addresses.

        Sub-resources are fetched one after another. If any call fails
        the whole tool call fails; nothing is returned partially.
        """
        order_id = input_data.order_id
        logger.info(
            "Getting order",
            order_id=order_id,
            include_products=input_data.include_products,
            include_shipping=input_data.include_shipping,
        )

        result: dict[str, Any] = {"order": await self.api.get_v2(f"/orders/{order_id}")}

        if input_data.include_products:
            result["products"] = await self.api.get_v2(f"/orders/{order_id}/products")
        if input_data.include_shipping:
            result["shipping_addresses"] = await self.api.get_v2(
                f"/orders/{order_id}/shipping_addresses"
            )

        return result

    # =========================================================================
    # Customers
    # =========================================================================

    async def list_customers(self, input_data: ListCustomersInput) -> Any:
        """List customers.

        Text filters map to BigCommerce operators (``email:in``,
        ``name:like``, ``company:like``, ``date_created:min`` and
        ``date_created:max``).
        """
        params = build_query(input_data)
        logger.info("Listing customers", params=params)
        return await self.api.get_v3("/customers", params)

    # =========================================================================
    # Inventory
    # =========================================================================

    async def update_inventory(self, input_data: UpdateInventoryInput) -> Any:
        """Set the inventory level of a variant, or of the product itself."""
        data = build_body(
            input_data,
            exclude={"product_id", "variant_id"},
        )

        if input_data.variant_id is not None:
            path = (
                f"/catalog/products/{input_data.product_id}"
                f"/variants/{input_data.variant_id}"
            )
        else:
            path = f"/catalog/products/{input_data.product_id}"

        logger.info(
            "Updating inventory",
            product_id=input_data.product_id,
            variant_id=input_data.variant_id,
            inventory_level=input_data.inventory_level,
        )
        return await self.api.put_v3(path, data)
