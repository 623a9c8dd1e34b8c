"""Entry point for running Golf Outings as a module.

This file allows Golf Outings to be run with: python -m golfoutings
It's also the console script entry point.
"""

from gevent import monkey

# Must run before the app imports anything that touches sockets or threads
monkey.patch_all()

from golfoutings.app import main  # noqa: E402

if __name__ == "__main__":
    main()
