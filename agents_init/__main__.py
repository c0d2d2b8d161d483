from agents_init.pipeline import main

main()
