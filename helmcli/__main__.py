from helmcli.cli.app import main

main()
