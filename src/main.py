"""Entry point for the layered pixel-art character creator.

Run with ``python src/main.py``; see ``character_creator.app`` for the window.
"""
from character_creator.app import main

if __name__ == "__main__":
    main()
