"""Clients for the external services mailroom delivers notifications through."""
