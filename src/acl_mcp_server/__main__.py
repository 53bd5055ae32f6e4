from acl_mcp_server import main

main()
