from eth_proxy.cli.main import main

main()
