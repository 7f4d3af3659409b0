"""Module entry-point so `python -m floxwrap` behaves like the console script."""

from .launcher import main

if __name__ == "__main__":
    main()
