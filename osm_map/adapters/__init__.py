"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Response caches (in-memory TTL, null)
- Geocoding backends (remote HTTP, pluggable geocoder)
"""
