from flask_restx import Namespace, Resource

from polegrid_api.utils.registration import register_submission, list_collection

ns = Namespace("contact", description="Contact messages", path="/contact")

@ns.route("")
class ContactList(Resource):
    def get(self):
        return list_collection("contact")

@ns.route("/create")
class ContactCreate(Resource):
    def post(self):
        """Store a contact message ({name, email, message})."""
        return register_submission("contact")
