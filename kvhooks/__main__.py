from kvhooks.cli import main

main()
