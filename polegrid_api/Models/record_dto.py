import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from polegrid_api.providers.StorageProvider.local_provider import LocalStorageProvider

@dataclass(frozen=True)
class EntitySchema:
    """Shape of one submission type: where it is stored and which files it takes."""
    entity: str
    collection: str
    label: str
    required_fields: Tuple[str, ...] = ()
    file_limits: Dict[str, int] = field(default_factory=dict)
    # file fields holding one path (or None) instead of a list
    single_file_fields: Tuple[str, ...] = ()

    @staticmethod
    def now_iso() -> str:
        return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    def missing_fields(self, data: Dict[str, Any]) -> List[str]:
        missing = []
        for name in self.required_fields:
            value = data.get(name)
            # absent, null or the empty string; whitespace counts as a value
            if value is None or value == "":
                missing.append(name)
        return missing

    def build_record(self, fields: Dict[str, Any], files: Dict[str, List[str]]) -> Dict[str, Any]:
        record = dict(fields)
        for name in self.file_limits:
            paths = [LocalStorageProvider.url_for(f) for f in files.get(name, [])]
            if name in self.single_file_fields:
                record[name] = paths[0] if paths else None
            else:
                record[name] = paths
        record["_id"] = self.new_id()
        record["createdAt"] = self.now_iso()
        return record


LANDLORD = EntitySchema(
    entity="landlord",
    collection="landlords",
    label="Landlord",
    file_limits={"idPhoto": 1, "ownershipDoc": 1, "supportingDocs": 5},
    single_file_fields=("idPhoto", "ownershipDoc"),
)

ORGANIZATION = EntitySchema(
    entity="organization",
    collection="organizations",
    label="Organization",
    file_limits={"documents": 10},
)

CONTACT = EntitySchema(
    entity="contact",
    collection="contact",
    label="Message",
)

SCHEMAS = {s.entity: s for s in (LANDLORD, ORGANIZATION, CONTACT)}

def schema_for(entity: str, required_fields: Optional[Tuple[str, ...]] = None) -> EntitySchema:
    """Return the schema for `entity`, with the configured required-field list applied."""
    base = SCHEMAS[entity]
    if required_fields is None:
        return base
    return replace(base, required_fields=tuple(required_fields))
