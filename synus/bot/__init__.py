"""
Discord Bot Layer.

Connects to Discord, dispatches prefix commands to cogs and turns pipeline
errors into plain-text channel replies.
"""

from synus.bot.client import SynusBot

__all__ = ["SynusBot"]
