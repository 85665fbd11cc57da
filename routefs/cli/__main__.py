#!/usr/bin/env python3
"""Entry point for routefs CLI when run as python -m routefs.cli."""

if __name__ == "__main__":
    from routefs.cli.main import main

    main()
