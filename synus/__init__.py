"""
Synus - Discord bot for quick in-channel translation.

This package provides the command handlers (translate, echo), the translation
pipeline behind them, and the bot client that wires both into discord.py.
"""

__version__ = "0.1.0"
