from src.cli.shell import main

main()
