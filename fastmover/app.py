# module fastmover.app
from fastmover.app_setup.factory import create_app

# App globale
app = create_app()
