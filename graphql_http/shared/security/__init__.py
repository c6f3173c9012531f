"""
Security middleware and rate limiting.
"""
