from imgico.main import main

main()
