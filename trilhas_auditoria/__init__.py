"""
Audit trails: record of actions performed on system entities.
"""
