from file_manager.cli.repl import main

if __name__ == "__main__":
    raise SystemExit(main())
