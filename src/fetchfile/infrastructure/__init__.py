"""Infrastructure layer — raw byte I/O against the filesystem.

This layer depends only on stdlib and :mod:`fetchfile.errors`.
It must never import from codecs, services, commands, or output.
"""
