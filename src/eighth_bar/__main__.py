"""Enable running eighth-bar as a module: python -m eighth_bar."""

from eighth_bar.cli import main

if __name__ == "__main__":
    main()
