"""
authconf CLI.

Usage:
    authconf detect auth.properties
    authconf inspect auth.properties overrides.yaml --callback-url https://app/callback
    authconf -v inspect auth.properties
"""

__version__ = "0.1.0"
__cli_name__ = "authconf"
