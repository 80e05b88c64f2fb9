from triples.entrypoint import main

main()
