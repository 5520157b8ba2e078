from pathfix.cli import main

main()
