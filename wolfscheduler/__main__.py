"""
Package entry point.

Allows running the application via:

    python -m wolfscheduler

This simply forwards execution to wolfscheduler.cli.main().
"""

from wolfscheduler.cli import main

if __name__ == "__main__":
    main()
