"""
Daily Fortune - one AI-generated fortune per calendar day.

Keeps the most recent fortune cached in a durable key-value store and
only asks the fortune provider for a new one after the day boundary
has passed.
"""

__version__ = "0.1.0"
__author__ = "Daily Fortune Team"
