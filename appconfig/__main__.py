from appconfig.main import main

main()
