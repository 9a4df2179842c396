"""Endpoint modules for the web portal API."""
