"""
Access logs: who accessed which resource, from where, and when.
"""
