"""FastAPI application exposing the auth, pages, leads, and signaling handlers.

Routes keep the `/.netlify/functions/<name>` paths the static pages call, so
the built site works unchanged against a local `pagesmith serve`.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pagesmith.auth.gate import AdminGate
from pagesmith.auth.tokens import SessionCodec
from pagesmith.config import Settings, auth_config, load_config
from pagesmith.crud.blobs import BlobStore, SQLBlobStore
from pagesmith.crud.database import init_db, make_engine
from pagesmith.server.errors import http_error_handler, validation_error_handler
from pagesmith.server.routes import auth, leads, pages, signaling
from pagesmith.signaling import SignalingRooms


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    pages_store: Optional[BlobStore] = None,
    leads_store: Optional[BlobStore] = None,
    ) -> FastAPI:
    """Build the app. Raises ConfigurationError when the secret or admin credentials are missing.

    Stores default to SQL-backed blob stores on settings.db_url.
    """
    settings = settings or load_config()
    config = auth_config(settings)
    codec = SessionCodec(config)

    if pages_store is None or leads_store is None:
        engine = make_engine(settings.db_url)
        init_db(engine)
        pages_store = pages_store or SQLBlobStore(engine, "pages")
        leads_store = leads_store or SQLBlobStore(engine, "leads")

    app = FastAPI(title=settings.app_name, docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.auth_config = config
    app.state.codec = codec
    app.state.gate = AdminGate(codec)
    app.state.pages_store = pages_store
    app.state.leads_store = leads_store
    app.state.rooms = SignalingRooms()

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(auth.router)
    app.include_router(pages.router, prefix="/.netlify/functions/pages")
    app.include_router(pages.router, prefix="/api/pages")
    app.include_router(leads.router)
    app.include_router(signaling.router)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    logger.debug("App created with db %s", settings.db_url)
    return app
