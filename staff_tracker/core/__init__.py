"""
Core configuration and request dependencies
"""
