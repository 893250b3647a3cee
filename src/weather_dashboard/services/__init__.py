"""
Shared service utilities.

- http.py - Pre-configured ``requests.Session`` (retry + default timeout)
"""
