from flask_restx import Namespace, Resource

from polegrid_api.utils.registration import register_submission, list_collection

ns = Namespace("landlords", description="Landlord registration", path="/")

@ns.route("/landlords")
class LandlordList(Resource):
    def get(self):
        """All registered landlords."""
        return list_collection("landlords")

@ns.route("/landlord/register")
class LandlordRegister(Resource):
    def post(self):
        """Register a landlord: form fields plus idPhoto, ownershipDoc and up to 5 supportingDocs."""
        return register_submission("landlord")
