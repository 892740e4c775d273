from wffrewrite.cli import main

main()
