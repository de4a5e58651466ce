"""
Console slot machine simulator.

Stake → spin → row evaluation → balance update, until the balance runs out.
"""

__version__ = "0.1.0"
