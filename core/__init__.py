"""
Core package - shared base classes for the service layer.
"""
