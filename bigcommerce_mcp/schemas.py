"""Tool input schemas.

One pydantic model per MCP tool. The models validate incoming
arguments, provide the JSON schema advertised by ``list_tools``, and
carry the BigCommerce filter names as serialization aliases
(``name`` is sent as ``name:like`` and so on).

Optional fields default to None; None means "not provided" and is
never sent upstream.
"""

from pydantic import BaseModel, Field, field_validator

INCLUDE_PRODUCT_DESCRIPTION = (
    "Sub-resources to include: variants, images, custom_fields, "
    "bulk_pricing_rules, primary_image, modifiers, options, videos"
)
AVAILABILITY_DESCRIPTION = "Availability: available, disabled, preorder"


# ============================================================================
# Products
# ============================================================================


class ListProductsInput(BaseModel):
    """Input schema for list_products tool."""

    limit: int | None = Field(
        None,
        description="Max products to return (default 50, max 250)",
    )
    page: int | None = Field(None, description="Page number for pagination")
    name: str | None = Field(
        None,
        serialization_alias="name:like",
        description="Filter by product name (partial match)",
    )
    sku: str | None = Field(None, description="Filter by SKU")
    brand_id: int | None = Field(None, description="Filter by brand ID")
    categories: str | None = Field(
        None,
        serialization_alias="categories:in",
        description="Filter by category ID(s), comma-separated",
    )
    is_visible: bool | None = Field(None, description="Filter by visibility status")
    availability: str | None = Field(
        None,
        description="Filter by availability: available, disabled, preorder",
    )
    include: str | None = Field(None, description=INCLUDE_PRODUCT_DESCRIPTION)


class GetProductInput(BaseModel):
    """Input schema for get_product tool."""

    product_id: int = Field(..., description="Product ID")
    include: str | None = Field(None, description=INCLUDE_PRODUCT_DESCRIPTION)


class CreateProductInput(BaseModel):
    """Input schema for create_product tool."""

    name: str = Field(..., description="Product name (required)")
    type: str = Field(..., description="Product type: physical, digital (required)")
    weight: float = Field(..., description="Product weight (required for physical)")
    price: float = Field(..., description="Product price (required)")
    sku: str | None = Field(None, description="Stock Keeping Unit")
    description: str | None = Field(
        None,
        description="Product description (HTML allowed)",
    )
    categories: list[int] | None = Field(None, description="Array of category IDs")
    brand_id: int | None = Field(None, description="Brand ID")
    inventory_level: int | None = Field(None, description="Current inventory level")
    inventory_tracking: str | None = Field(
        None,
        description="Inventory tracking: none, product, variant",
    )
    is_visible: bool | None = Field(
        None,
        description="Whether product is visible on storefront",
    )
    availability: str | None = Field(None, description=AVAILABILITY_DESCRIPTION)
    cost_price: float | None = Field(
        None,
        description="Cost price for profit calculations",
    )
    sale_price: float | None = Field(None, description="Sale price")


class UpdateProductInput(BaseModel):
    """Input schema for update_product tool.

    Only the fields that are provided end up in the request body.
    """

    product_id: int = Field(..., description="Product ID (required)")
    name: str | None = Field(None, description="Product name")
    price: float | None = Field(None, description="Product price")
    sku: str | None = Field(None, description="Stock Keeping Unit")
    description: str | None = Field(None, description="Product description")
    categories: list[int] | None = Field(None, description="Array of category IDs")
    inventory_level: int | None = Field(None, description="Current inventory level")
    is_visible: bool | None = Field(None, description="Whether product is visible")
    availability: str | None = Field(None, description=AVAILABILITY_DESCRIPTION)
    sale_price: float | None = Field(None, description="Sale price")


# ============================================================================
# Orders
# ============================================================================


class ListOrdersInput(BaseModel):
    """Input schema for list_orders tool."""

    limit: int | None = Field(
        None,
        description="Max orders to return (default 50, max 250)",
    )
    page: int | None = Field(None, description="Page number for pagination")
    min_date_created: str | None = Field(
        None,
        description="Filter by min creation date (RFC 2822 or ISO 8601)",
    )
    max_date_created: str | None = Field(
        None,
        description="Filter by max creation date",
    )
    status_id: int | None = Field(None, description="Filter by status ID")
    customer_id: int | None = Field(None, description="Filter by customer ID")
    min_total: float | None = Field(None, description="Filter by minimum total")
    max_total: float | None = Field(None, description="Filter by maximum total")
    is_deleted: bool | None = Field(None, description="Include deleted orders")
    sort: str | None = Field(
        None,
        description="Sort field: id, date_created, date_modified, status_id",
    )


class GetOrderInput(BaseModel):
    """Input schema for get_order tool."""

    order_id: int = Field(..., description="Order ID")
    include_products: bool = Field(
        default=False,
        description="Include order products (separate call)",
    )
    include_shipping: bool = Field(
        default=False,
        description="Include shipping addresses (separate call)",
    )

    @field_validator("include_products", "include_shipping", mode="before")
    @classmethod
    def null_means_false(cls, value: object) -> object:
        """Treat an explicit null like an omitted flag."""
        return False if value is None else value


# ============================================================================
# Customers
# ============================================================================


class ListCustomersInput(BaseModel):
    """Input schema for list_customers tool."""

    limit: int | None = Field(
        None,
        description="Max customers to return (default 50, max 250)",
    )
    page: int | None = Field(None, description="Page number for pagination")
    email: str | None = Field(
        None,
        serialization_alias="email:in",
        description="Filter by email address",
    )
    name: str | None = Field(
        None,
        serialization_alias="name:like",
        description="Filter by name (first or last)",
    )
    company: str | None = Field(
        None,
        serialization_alias="company:like",
        description="Filter by company name",
    )
    customer_group_id: int | None = Field(
        None,
        description="Filter by customer group ID",
    )
    date_created_min: str | None = Field(
        None,
        serialization_alias="date_created:min",
        description="Filter by minimum creation date",
    )
    date_created_max: str | None = Field(
        None,
        serialization_alias="date_created:max",
        description="Filter by maximum creation date",
    )
    include: str | None = Field(
        None,
        description="Sub-resources: addresses, storecredit, attributes, formfields",
    )


# ============================================================================
# Inventory
# ============================================================================


class UpdateInventoryInput(BaseModel):
    """Input schema for update_inventory tool."""

    product_id: int = Field(..., description="Product ID (required)")
    variant_id: int | None = Field(
        None,
        description="Variant ID (if updating variant inventory)",
    )
    inventory_level: int = Field(..., description="New inventory level (required)")
    inventory_warning_level: int | None = Field(
        None,
        description="Low stock warning threshold",
    )
