from flask import g, request
from flask_restx import Namespace, Resource

from polegrid_api.providers.StorageProvider.local_provider import LocalStorageProvider
from polegrid_api.utils.errors import ValidationError
from polegrid_api.utils.upload_handler import collect_files

ns = Namespace("upload", description="Generic file upload", path="/upload")

@ns.route("")
class Upload(Resource):
    def post(self):
        """Store a single multipart `file` and return its public path."""
        storage = LocalStorageProvider(g.cfg.upload_dir)
        stored = collect_files(request.files, {"file": 1}, storage)
        if not stored.get("file"):
            raise ValidationError("MISSING_FILE", "No file uploaded", 400)

        return {
            "success": True,
            "message": "File uploaded successfully!",
            "filePath": storage.url_for(stored["file"][0]),
        }
