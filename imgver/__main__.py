from imgver.cli.app import main

main()
