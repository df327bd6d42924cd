import importlib
import pkgutil
from flask_restx import Namespace, Api

def load_routes( rest_api: Api, package: str = "polegrid_api.routes") -> None:
    """
    Dynamically import all modules under `package` and register any Flask-RESTX Namespace found.

    Each route module exports its Namespace as `ns` (or `api`).
    """
    pkg = importlib.import_module(package)

    for modinfo in sorted(pkgutil.iter_modules(pkg.__path__, pkg.__name__ + "."), key=lambda m: m.name):
        if modinfo.ispkg:
            continue  # skip sub-packages, only load modules

        module = importlib.import_module(modinfo.name)

        namespace = getattr(module, "api", None) or getattr(module, "ns", None)
        if isinstance(namespace, Namespace):
            rest_api.add_namespace(namespace)
