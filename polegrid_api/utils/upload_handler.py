from typing import Dict, List, Tuple

from werkzeug.datastructures import FileStorage, MultiDict

from polegrid_api.Logger.log_main import get_logger
from polegrid_api.providers.StorageProvider.local_provider import LocalStorageProvider
from polegrid_api.utils.errors import ValidationError

logger = get_logger()

def collect_files(files: "MultiDict[str, FileStorage]", limits: Dict[str, int], storage: LocalStorageProvider) -> Dict[str, List[str]]:
    """
    Store every uploaded file of the request and return generated names per field.

    Args:
        files: the request's multipart files (``request.files``).
        limits: allowed field name -> max number of files for that field.
        storage: where the bytes go.

    Returns:
        {field: [generated filename, ...]} for each field that carried files.

    Every field is checked before any byte is written, so a rejected request
    leaves nothing behind in the upload directory.
    """
    # 1) validate field names and counts
    pending: List[Tuple[str, FileStorage]] = []
    for field in files.keys():
        parts = [f for f in files.getlist(field) if f and f.filename]
        if not parts:
            continue
        if field not in limits:
            raise ValidationError("UNEXPECTED_FILE_FIELD", f"Unexpected file field '{field}'", 400)
        if len(parts) > limits[field]:
            raise ValidationError("TOO_MANY_FILES", f"Field '{field}' accepts at most {limits[field]} file(s)", 400)
        pending.extend((field, f) for f in parts)

    # 2) write, removing what was already written if a later file fails
    stored: Dict[str, List[str]] = {}
    try:
        for field, f in pending:
            name = storage.generate_name(f.filename)
            storage.save(name, f.read())
            logger.info("file_stored", extra={"stored_name": name})
            stored.setdefault(field, []).append(name)
    except Exception:
        discard_files(stored, storage)
        raise
    return stored

def discard_files(stored: Dict[str, List[str]], storage: LocalStorageProvider) -> None:
    for names in stored.values():
        for name in names:
            storage.delete(name)
