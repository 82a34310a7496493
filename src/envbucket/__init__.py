"""envbucket - environment repository backed by an object-storage bucket.

By default, envbucket's internal logging is disabled when used as a library.
Library users can enable logging by calling envbucket.enable_logging().
"""

from envbucket.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
