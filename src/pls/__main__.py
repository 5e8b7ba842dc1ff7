from pls.cli.main import main

main()
