from pkpad.cli.__main__ import main

main()
