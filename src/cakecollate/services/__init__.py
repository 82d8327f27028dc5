"""Service layer — validation runs returning ServiceResult.

Services may import from domain, parser and config.
They must never import from commands or output.
"""
