# ABOUTME: Babeltui - interactive terminal lookup of book metadata on Babelio.
# ABOUTME: Exposes the package version.

__version__ = "0.1.0"
