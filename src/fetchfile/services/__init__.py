"""Service layer — config file operations returning ServiceResult.

Services may import from the library core (fetchable, codecs, errors).
They must never import from commands or output.
"""
