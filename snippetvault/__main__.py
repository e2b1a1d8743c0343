from snippetvault.cli import main

main()
