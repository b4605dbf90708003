"""Launch the web app under uvicorn on the configured port."""
from __future__ import annotations
import logging

import uvicorn

from serverless_genai.serve.fastapi_app import SETTINGS, app

LOGGER = logging.getLogger("serverless_genai.serve.server")

def main() -> None:
    # uvicorn logs the bound address once the socket is listening.
    LOGGER.info("Starting web application on %s:%s", SETTINGS.host, SETTINGS.port)
    uvicorn.run(app, host=SETTINGS.host, port=SETTINGS.port, log_config=None)

if __name__ == "__main__":
    main()
