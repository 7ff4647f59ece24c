"""Command-line interface."""
from meshgraph.main import main

if __name__ == "__main__":
    main()
