from typing import Any, Dict, Tuple

from flask import g, request

from polegrid_api.Logger.log_main import get_logger
from polegrid_api.Models.record_dto import schema_for
from polegrid_api.providers.StorageProvider.local_provider import LocalStorageProvider
from polegrid_api.utils.errors import ValidationError
from polegrid_api.utils.record_store import RecordStore
from polegrid_api.utils.upload_handler import collect_files, discard_files

logger = get_logger()

def submitted_fields() -> Dict[str, Any]:
    """Fields of the current request: JSON object body, else form fields.

    A form key sent more than once becomes a list of strings.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValidationError("INVALID_BODY", "Request body must be a JSON object", 400)
        return dict(payload)

    fields: Dict[str, Any] = {}
    for key in request.form.keys():
        values = request.form.getlist(key)
        fields[key] = values[0] if len(values) == 1 else values
    return fields

def register_submission(entity: str) -> Tuple[Dict[str, Any], int]:
    # 1) validate
    schema = schema_for(entity, g.cfg.required_fields(entity))
    fields = submitted_fields()
    missing = schema.missing_fields(fields)
    if missing:
        raise ValidationError("MISSING_FIELDS", f"Missing required fields: {', '.join(missing)}", 400)

    # 2) store uploaded files
    storage = LocalStorageProvider(g.cfg.upload_dir)
    files = collect_files(request.files, schema.file_limits, storage)

    # 3) build and persist; a failed append leaves no orphaned uploads
    try:
        record = schema.build_record(fields, files)
        RecordStore(g.cfg.db_path).append(schema.collection, record)
    except Exception:
        discard_files(files, storage)
        raise
    logger.info("record_created", extra={
        "request_id": getattr(g, "request_id", None),
        "entity": entity,
        "record_id": record["_id"],
    })

    message = "Message received and saved to DB!" if entity == "contact" else f"{schema.label} registered and saved to DB!"
    return {"success": True, "message": message, "data": record}, 200

def list_collection(collection: str) -> Dict[str, Any]:
    return {"success": True, "data": RecordStore(g.cfg.db_path).list(collection)}
