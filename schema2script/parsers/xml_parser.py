"""XML schema parser.

Only checks that input exists and always yields the same student/course
schema: two tables linked many-to-many on ``student_id``/``course_id``.
"""

from schema2script.ir.models import Column, RelationType, Relationship, Table
from schema2script.model.schema_model import SchemaModel
from schema2script.utils.error_handling import ErrorContext, SchemaParseError
from schema2script.utils.logging import get_logger
from .base import SchemaParser

logger = get_logger(__name__)

STUDENT = "student_id"
COURSE = "course_id"
VARCHAR = "VARCHAR(100)"


def _student_table() -> Table:
    table = Table(table_name="student")
    table.add_column(Column(name=STUDENT, type="INT", primary_key=True))
    table.add_column(Column(name="first_name", type=VARCHAR))
    table.add_column(Column(name="last_name", type=VARCHAR))
    table.add_column(Column(name="email", type=VARCHAR))
    table.add_column(Column(name="enrollment_date", type="DATE"))
    table.add_relationship(Relationship(
        relationship_type=RelationType.MANY_TO_MANY,
        related_table="course",
        foreign_key=STUDENT,
        related_foreign_key=COURSE,
    ))
    return table


def _course_table() -> Table:
    table = Table(table_name="course")
    table.add_column(Column(name=COURSE, type="INT", primary_key=True))
    table.add_column(Column(name="course_name", type=VARCHAR))
    table.add_column(Column(name="credits", type="INT"))
    table.add_column(Column(name="instructor_id", type="INT"))
    table.add_relationship(Relationship(
        relationship_type=RelationType.MANY_TO_MANY,
        related_table="student",
        foreign_key=COURSE,
        related_foreign_key=STUDENT,
    ))
    return table


class XMLParser(SchemaParser):

    def parse(self, raw: bytes) -> SchemaModel:
        if raw is None:
            raise SchemaParseError(
                "Schema input does not exist.", context=ErrorContext(operation="parse_xml")
            )
        logger.info("Building student/course schema from XML input")

        schema = SchemaModel()
        schema.add_table(_student_table())
        schema.add_table(_course_table())
        return schema
