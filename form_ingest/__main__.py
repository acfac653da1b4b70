"""Run the ingest API with uvicorn: ``python -m form_ingest``."""

from __future__ import annotations

import uvicorn

from form_ingest.settings import load_settings
from form_ingest.utils.logger import configure_logging, logger

APP_IMPORT_PATH = "form_ingest.main:app"


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    # uvicorn imports the module-level app itself, so it is built exactly once.
    logger.info(f"Servidor da API rodando em http://localhost:{settings.port}")
    uvicorn.run(APP_IMPORT_PATH, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
