"""An insertion-ordered seeded hash table, process-wide hash seeding and version checks."""

__version__ = "2.14.0"