"""
Data access package: models, connectors, parsers and repositories.
"""
