from pass_vault.cli import main

main()
