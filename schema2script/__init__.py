"""schema2script: relational schema descriptions to SQL DDL."""

__version__ = "1.0.0"
