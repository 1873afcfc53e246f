"""Entry point for 'python -m travel_companion' command."""

from travel_companion.cli import main

if __name__ == "__main__":
    main()
