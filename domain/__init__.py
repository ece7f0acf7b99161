"""
Domain package - enums and document models.
"""
