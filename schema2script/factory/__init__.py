"""Format-name resolution for parsers and generators.

Import from the submodules directly: ``parser_factory`` depends on the
parsers, which depend on the schema container, which itself uses
``generator_factory``.
"""
