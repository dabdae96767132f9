"""Schema editing endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from backend.dependencies import get_schema_service
from backend.models.requests import (
    AddColumnRequest,
    AddRelationshipRequest,
    AddTableRequest,
    EditColumnRequest,
    EditRelationshipRequest,
    EditTableRequest,
    GenerateScriptRequest,
    UploadSchemaRequest,
)
from backend.models.responses import NameListResponse, SchemaResponse, ScriptResponse
from backend.services.schema_service import SchemaSessionService, SessionNotLoadedError
from schema2script.utils.error_handling import ErrorContext, SchemaParseError, create_error_response

router = APIRouter(prefix="/api/schema", tags=["schema"])


def _bool_answer(value: bool) -> str:
    return "true" if value else "false"


@router.post("/upload", response_model=SchemaResponse)
def upload_schema(
    request: UploadSchemaRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    """
    Load a schema document into the session.

    The file extension (.json / .xml) selects the parser. A document that
    fails to parse leaves the previous session untouched.
    """
    try:
        return service.upload(request.filename, request.content)
    except SchemaParseError as e:
        context = e.context or ErrorContext(operation="upload")
        raise HTTPException(status_code=400, detail=create_error_response(e, context))


@router.get("/tables", response_model=SchemaResponse)
def get_tables(service: SchemaSessionService = Depends(get_schema_service)):
    return service.snapshot()


@router.get("/tables/{table_name}/columns", response_model=NameListResponse)
def get_column_names(table_name: str, service: SchemaSessionService = Depends(get_schema_service)):
    if not service.has_table(table_name):
        raise HTTPException(status_code=404, detail="Table not found")
    return NameListResponse(table_name=table_name, names=service.column_names(table_name))


@router.get("/tables/{table_name}/relationships", response_model=NameListResponse)
def get_related_table_names(table_name: str, service: SchemaSessionService = Depends(get_schema_service)):
    if not service.has_table(table_name):
        raise HTTPException(status_code=404, detail="Table not found")
    return NameListResponse(table_name=table_name, names=service.related_table_names(table_name))


@router.post("/tables", response_model=SchemaResponse)
def add_table(request: AddTableRequest, service: SchemaSessionService = Depends(get_schema_service)):
    return service.add_table(request.table_name)


@router.post("/columns", response_model=SchemaResponse)
def add_column(request: AddColumnRequest, service: SchemaSessionService = Depends(get_schema_service)):
    result = service.add_column([
        request.table_name,
        request.name,
        request.type,
        _bool_answer(request.primary_key),
    ])
    if result is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return result


@router.post("/relationships", response_model=SchemaResponse)
def add_relationship(
    request: AddRelationshipRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    result = service.add_relationship([
        request.table_name,
        request.foreign_key,
        request.related_table,
        request.related_foreign_key,
        request.relationship_type.value,
        request.through_table,
    ])
    if result is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return result


@router.put("/tables/{table_name}", response_model=SchemaResponse)
def edit_table(
    table_name: str,
    request: EditTableRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    return service.edit_table(table_name, request.new_table_name)


@router.put("/tables/{table_name}/columns/{column_name}", response_model=SchemaResponse)
def edit_column(
    table_name: str,
    column_name: str,
    request: EditColumnRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    return service.edit_column(
        table_name,
        column_name,
        [request.name, request.type, _bool_answer(request.primary_key)],
    )


@router.put("/tables/{table_name}/relationships/{related_table}", response_model=SchemaResponse)
def edit_relationship(
    table_name: str,
    related_table: str,
    request: EditRelationshipRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    return service.edit_relationship(
        table_name,
        related_table,
        [request.relationship_type.value, request.foreign_key, request.related_foreign_key],
    )


@router.delete("/tables/{table_name}", response_model=SchemaResponse)
def delete_table(table_name: str, service: SchemaSessionService = Depends(get_schema_service)):
    return service.delete_table(table_name)


@router.delete("/tables/{table_name}/columns/{column_name}", response_model=SchemaResponse)
def delete_column(
    table_name: str,
    column_name: str,
    service: SchemaSessionService = Depends(get_schema_service),
):
    return service.delete_column(table_name, column_name)


@router.delete("/tables/{table_name}/relationships/{related_table}", response_model=SchemaResponse)
def delete_relationship(
    table_name: str,
    related_table: str,
    service: SchemaSessionService = Depends(get_schema_service),
):
    return service.delete_relationship(table_name, related_table)


@router.post("/script", response_model=ScriptResponse)
def generate_script(
    request: GenerateScriptRequest,
    service: SchemaSessionService = Depends(get_schema_service),
):
    """
    Render the session's schema for a dialect.

    On failure the response is a 400 whose detail carries the structured
    error and the previously generated script (null if there is none).
    """
    try:
        script, error = service.generate_script(request.dialect)
    except SessionNotLoadedError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if error is not None:
        context = error.context or ErrorContext(operation="generate_script")
        detail = create_error_response(error, context)
        detail["script"] = script
        raise HTTPException(status_code=400, detail=detail)

    return ScriptResponse(dialect=request.dialect, script=script)
