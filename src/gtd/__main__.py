from .cli import main

# No error handling here; cli.main() is the only error boundary so that
# `python -m gtd` and the installed `gtd` script behave the same.
if __name__ == "__main__":
    main()
