from tellmewhy.cli import main

main()
