"""
Application FastAPI : point d'entrée
====================================

Rôle
----
- Instancie l'app FastAPI, configure le CORS pour le front,
- Branche le conteneur de services (`app.state.services`),
- Monte les routeurs et les handlers d'erreurs,
- Liste les routes dans les logs au démarrage.

Notes
-----
- Les imports des routeurs sont explicites (pas d'auto-discovery).
- Le middleware CORS est ajouté AVANT les include_router.
- Les erreurs de service sortent en `{"error": ..., "kind": ...}` avec leur
  code ; les erreurs de validation du corps donnent 400 (et non le 422 de
  FastAPI) ; les échecs de stockage (IO, JSON illisible ou non encodable)
  donnent un 500 générique.
"""
import logging

import orjson
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardzones.config.settings import settings
from cardzones.routes.auth import router as auth_router
from cardzones.routes.catalog import router as catalog_router
from cardzones.routes.characters import router as characters_router
from cardzones.routes.health import router as health_router
from cardzones.routes.users import router as users_router
from cardzones.services.container import build_services
from cardzones.services.errors import InvalidInput, ServiceError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.state.services = build_services()

# ===========================
# CORS
# ===========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,          # ← cookie de session
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===========================
# Handlers d'erreurs
# ===========================
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body", extra={"path": request.url.path, "errors": exc.errors()})
    err = InvalidInput()
    return JSONResponse(status_code=err.status_code, content=err.to_payload())


@app.exception_handler(OSError)
@app.exception_handler(orjson.JSONDecodeError)
@app.exception_handler(orjson.JSONEncodeError)
async def storage_error_handler(request: Request, exc: Exception):
    logger.exception("Storage failure", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ===========================
# Montage des routers
# ===========================
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(catalog_router)
app.include_router(characters_router)
app.include_router(health_router)


@app.get("/")
async def root():
    """Ping basique."""
    return {"ok": True, "service": "cardzones-backend"}


@app.on_event("startup")
async def list_routes():
    logger.info("Store: %s", app.state.services.store.path)
    for r in app.routes:
        methods = getattr(r, "methods", None)
        if methods:
            logger.info("Route %s %s", ",".join(sorted(methods)), r.path)
