from cmon_sd.cli import main

main()
