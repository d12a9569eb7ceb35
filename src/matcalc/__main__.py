from matcalc.cli.main import main

main()
