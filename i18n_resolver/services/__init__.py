"""
HTTP hosting for the translation functions
"""
