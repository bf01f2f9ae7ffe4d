"""
Permissions catalogue.
"""
