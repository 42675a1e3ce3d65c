"""Security Misconfiguration Demo API."""
