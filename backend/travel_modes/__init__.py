"""
Travel Modes

Multi-modal travel-time estimates (drive, transit, bike, walk)
derived from a single driving route.
"""

__version__ = "0.1.0"
