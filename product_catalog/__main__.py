from product_catalog.app import main

main()
