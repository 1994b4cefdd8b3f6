"""
Freecell - A solitaire engine with a terminal front end.

The package provides:
- Card, board and rules model, including multi-card supermoves
- An engine that applies player intents and keeps undo history
- Seeded, reproducible deals
- Read-only snapshots for renderers
- A curses front end and CLI
"""

__version__ = "0.1.0"
