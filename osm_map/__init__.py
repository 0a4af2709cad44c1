"""Top-level package for osm-map.

This package turns a list of place descriptors (explicit coordinates or
free-text addresses) into a renderable map model: validated markers,
a computed viewport, and serializable fragments for an external renderer.

Free-text entries are resolved through a pluggable geocoder or a
Nominatim-compatible HTTP endpoint, with response caching and
outbound rate limiting.
"""

__title__ = "osm-map"
__version__ = "0.6.0"

USER_AGENT = f"{__title__}/{__version__}"

__all__ = ["__title__", "__version__", "USER_AGENT"]
