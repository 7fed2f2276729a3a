from tintwind.cli import main

main()
