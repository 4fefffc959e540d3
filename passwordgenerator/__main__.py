from passwordgenerator.window import main

main()
