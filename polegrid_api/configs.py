import os
from dataclasses import dataclass
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LANDLORD_FIELDS = "fullName,email,phone,propertyAddress"
DEFAULT_ORGANIZATION_FIELDS = "organizationName,contactPerson,email,phone"
DEFAULT_CONTACT_FIELDS = "name,email,message"

@dataclass(frozen=True)
class AppConfig:
    env: str
    port: int
    storage_dir: str
    db_path: str
    upload_dir: str
    cors_origins: Tuple[str, ...]
    landlord_required_fields: Tuple[str, ...]
    organization_required_fields: Tuple[str, ...]
    contact_required_fields: Tuple[str, ...]
    log_level: str

    def required_fields(self, entity: str) -> Tuple[str, ...]:
        return getattr(self, f"{entity}_required_fields")

def _csv(value: str) -> Tuple[str, ...]:
    # empty string means "no required fields"
    return tuple(part.strip() for part in value.split(",") if part.strip())

def load_config() -> AppConfig:
    storage_dir = os.getenv("STORAGE_DIR", "./data")
    return AppConfig(
        env=os.getenv("APP_ENV", "local"),
        port=int(os.getenv("PORT", 3000)),
        storage_dir=storage_dir,
        db_path=os.getenv("DB_PATH", f"{storage_dir}/db.json"),
        upload_dir=os.getenv("UPLOAD_DIR", f"{storage_dir}/uploads"),
        cors_origins=_csv(os.getenv("CORS_ORIGINS", "*")),
        landlord_required_fields=_csv(os.getenv("LANDLORD_REQUIRED_FIELDS", DEFAULT_LANDLORD_FIELDS)),
        organization_required_fields=_csv(os.getenv("ORGANIZATION_REQUIRED_FIELDS", DEFAULT_ORGANIZATION_FIELDS)),
        contact_required_fields=_csv(os.getenv("CONTACT_REQUIRED_FIELDS", DEFAULT_CONTACT_FIELDS)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
