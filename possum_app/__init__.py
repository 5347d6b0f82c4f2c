"""
Possum App - Passel Liveness State Tracker

Tracks whether each possum of a passel is alive or dead in a relational
state table, with membership and database credentials taken from the
platform's service-binding environment.
"""

__version__ = "0.1.0"
__author__ = "Possum Team"
