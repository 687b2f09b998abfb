from sorting_tool.cli import main

main()
