"""
Shared utilities.

- http.py      - Pre-configured requests session (User-Agent, default timeout)
"""
