from bigcommerce_mcp.main import main

main()
