"""Kudos: peer-recognition feed service"""

__version__ = "0.1.0"
