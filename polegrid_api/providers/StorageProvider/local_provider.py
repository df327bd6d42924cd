import random
import time
from pathlib import Path

from polegrid_api.utils.errors import StorageError

UPLOAD_URL_PREFIX = "/uploads"

class LocalStorageProvider:
    def __init__(self, base_dir: str):
        self.base_dir = Path(base_dir)

    @staticmethod
    def generate_name(original: str) -> str:
        """<epoch-ms>-<random int><original extension>, e.g. 1700000000000-483920117.pdf"""
        ext = Path(original or "").suffix.lower()
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"

    @staticmethod
    def url_for(filename: str) -> str:
        return f"{UPLOAD_URL_PREFIX}/{filename}"

    def save(self, filename: str, content: bytes) -> str:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            path = self.base_dir / filename
            path.write_bytes(content)
        except OSError as e:
            raise StorageError("UPLOAD_WRITE_FAILED", f"cannot write {filename} to {self.base_dir}: {e}") from e
        return str(path)

    def read(self, filename: str) -> bytes:
        return (self.base_dir / filename).read_bytes()

    def exists(self, filename: str) -> bool:
        return (self.base_dir / filename).is_file()

    def delete(self, filename: str) -> None:
        try:
            (self.base_dir / filename).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError("UPLOAD_DELETE_FAILED", f"cannot delete {filename} from {self.base_dir}: {e}") from e
