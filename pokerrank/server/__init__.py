"""
PokerRank Server - FastAPI HTTP layer
"""

from pokerrank.server.app import app, create_app

__all__ = ["app", "create_app"]
