"""
Web application package for the win-probability estimator.

Provides a FastAPI-based REST API that a board UI calls after every move to
refresh the player's win-probability readout.
"""
