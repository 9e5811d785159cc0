from dumpling_bench.main import main

main()
