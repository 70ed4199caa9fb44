"""valuekit — small, stateless value and collection utilities.

Pure formatting, filtering, deduplication, and pricing helpers with a
thin JSON-driven command line front end.
"""

from valuekit.version import __version__

__all__: list[str] = ["__version__"]
