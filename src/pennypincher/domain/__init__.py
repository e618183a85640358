"""Domain layer for pennypincher application.

Submodules are imported directly (``from pennypincher.domain.importer import
BatchImporter``); the package itself stays import-free so that the database
and utils layers can depend on ``pennypincher.domain.entities`` and
``pennypincher.domain.errors`` without cycles.
"""
