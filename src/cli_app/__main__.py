"""Entry point for running cli-app as a module.

This allows running: python -m cli_app
"""

from .cli import main

# No error handling here. All catch-all handling lives in cli.run() so that
# both `python -m cli_app` and the installed `cli-app` script go through
# exactly the same code path.
if __name__ == "__main__":
    main()
