"""
Rides Management API
====================
Entry point. Run with: uvicorn main:app --reload
"""

import uvicorn

from rides_api.api.app import create_app
from rides_api.config import settings
from rides_api.logging_config import configure_logging

configure_logging(settings)
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.app_host, port=settings.app_port, reload=True)
