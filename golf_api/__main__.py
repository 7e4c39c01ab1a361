from golf_api.app import main

main()
