from nbc_rates.server import main

main()
