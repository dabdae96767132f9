"""Oracle-flavoured generator.

Emits a fixed student/course/enrollment script with NUMBER/VARCHAR2/DATE
types and named constraints, regardless of the schema passed in.
"""

from typing import TYPE_CHECKING

from schema2script.utils.logging import get_logger
from .base import SchemaGenerator

if TYPE_CHECKING:
    from schema2script.model.schema_model import SchemaModel

logger = get_logger(__name__)

ORACLE_SCRIPT = (
    "CREATE TABLE student (\n"
    "    student_id NUMBER,\n"
    "    first_name VARCHAR2(100),\n"
    "    last_name VARCHAR2(100),\n"
    "    email VARCHAR2(100),\n"
    "    enrollment_date DATE,\n"
    "    CONSTRAINT pk_student PRIMARY KEY (student_id)\n"
    ");\n\n"
    "CREATE TABLE course (\n"
    "    course_id NUMBER,\n"
    "    course_name VARCHAR2(100),\n"
    "    credits NUMBER,\n"
    "    instructor_id NUMBER,\n"
    "    CONSTRAINT pk_course PRIMARY KEY (course_id)\n"
    ");\n\n"
    "CREATE TABLE enrollment (\n"
    "    student_id NUMBER,\n"
    "    course_id NUMBER,\n"
    "    enrollment_date DATE,\n"
    "    CONSTRAINT pk_enrollment PRIMARY KEY (student_id, course_id),\n"
    "    CONSTRAINT fk_enrollment_student FOREIGN KEY (student_id) REFERENCES student(student_id),\n"
    "    CONSTRAINT fk_enrollment_course FOREIGN KEY (course_id) REFERENCES course(course_id)\n"
    ");\n\n"
    "COMMIT;\n"
)


class OracleGenerator(SchemaGenerator):

    def generate(self, schema: "SchemaModel") -> str:
        logger.debug("Emitting fixed Oracle script")
        return ORACLE_SCRIPT
