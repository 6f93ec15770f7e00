from agent2048.cli import main

main()
