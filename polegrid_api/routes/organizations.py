from flask_restx import Namespace, Resource

from polegrid_api.utils.registration import register_submission, list_collection

ns = Namespace("organizations", description="Organization registration", path="/")

@ns.route("/organizations")
class OrganizationList(Resource):
    def get(self):
        return list_collection("organizations")

@ns.route("/organization/register")
class OrganizationRegister(Resource):
    def post(self):
        """Register an organization with up to 10 `documents` files."""
        return register_submission("organization")
