"""SQL generators, one per output dialect."""

from .base import SchemaGenerator
from .sql_generator import SqlGenerator
from .oracle_generator import OracleGenerator, ORACLE_SCRIPT

__all__ = ["SchemaGenerator", "SqlGenerator", "OracleGenerator", "ORACLE_SCRIPT"]
