"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure is
translated into exactly one classified API response.
"""
