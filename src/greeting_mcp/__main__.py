from greeting_mcp.cli import main

main()
