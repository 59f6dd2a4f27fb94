"""
Utility helpers for seeding and logging.
"""
