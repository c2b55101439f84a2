"""
Store, reference data and sample data services
"""
