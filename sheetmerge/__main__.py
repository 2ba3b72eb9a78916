from sheetmerge.cli import main

main()
