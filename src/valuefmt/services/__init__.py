"""Service layer — domain calls wrapped in ServiceResult.

Services may import from domain, infrastructure and config.
They must never import from commands or output.
"""
