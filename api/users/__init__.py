"""
User feature package: schemas, raw SQL repository, service and endpoints.
"""
