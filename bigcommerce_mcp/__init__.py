"""BigCommerce MCP Server.

Exposes a subset of the BigCommerce REST API as MCP tools for AI agent
interaction.

This package provides:
- MCP tools for catalog products, orders, customers and inventory
- Thin adapter layer over the BigCommerce v2 and v3 REST APIs
- Static API token authentication (X-Auth-Token)

Tools:
1. list_products - List catalog products with filters
2. get_product - Get a single product
3. create_product - Create a catalog product
4. update_product - Partially update a product
5. list_orders - List orders (v2 API)
6. get_order - Get an order with optional products and shipping addresses
7. list_customers - List customers with filters
8. update_inventory - Set product or variant inventory level
"""

__version__ = "1.0.0"
