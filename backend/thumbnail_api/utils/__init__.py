"""
Utility functions for the Thumbnail API
"""
