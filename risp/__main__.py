from risp.repl import main

main()
