"""Unit tests for the Oracle generator."""

from schema2script.generators import ORACLE_SCRIPT, OracleGenerator
from schema2script.ir.models import Table
from schema2script.model import SchemaModel


class TestOracleGenerator:

    def test_output_ignores_schema(self, schema):
        empty = SchemaModel()
        empty.tables.append(Table(table_name="ignored"))

        assert OracleGenerator().generate(schema) == OracleGenerator().generate(empty) == ORACLE_SCRIPT

    def test_script_shape(self):
        script = OracleGenerator().generate(SchemaModel())

        assert script.count("CREATE TABLE") == 3
        assert "    student_id NUMBER,\n" in script
        assert "VARCHAR2(100)" in script
        assert "CONSTRAINT pk_enrollment PRIMARY KEY (student_id, course_id)," in script
        assert "CONSTRAINT fk_enrollment_course FOREIGN KEY (course_id) REFERENCES course(course_id)\n);" in script
        assert script.endswith(");\n\nCOMMIT;\n")
