"""
Shared service utilities.

- http.py - ``requests`` session with retry/backoff, used for remote tables
"""
