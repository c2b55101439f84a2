"""
Staff Tracker - field employee location and availability API
"""

__version__ = "1.0.0"
