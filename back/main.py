# Local application imports
from civicdesk.main import create_app

# Create the app instance (uvicorn main:app)
app = create_app()
