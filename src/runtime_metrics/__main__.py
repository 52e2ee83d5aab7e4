from runtime_metrics.cli.main import main

main()
