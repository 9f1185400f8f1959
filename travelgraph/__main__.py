"""Allow ``python -m travelgraph``."""

from travelgraph.cli import main

if __name__ == "__main__":
    main()
