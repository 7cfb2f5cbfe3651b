from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .routers import records, certificates, assets
from .config import store_settings
from .errors import BackendUnavailable, DuplicateKey, NotFound, StoreError, ValidationError
from .logs import setup_logging
from .schemas import HealthStatus
from .store import RecordStore, build_store, get_store

app = FastAPI(title="No Dues Certificate API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERROR_STATUS = {
    NotFound: 404,
    DuplicateKey: 409,
    ValidationError: 422,
    BackendUnavailable: 503,
}

@app.on_event("startup")
def on_startup():
    setup_logging()
    app.state.store = build_store(store_settings())

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    code = _ERROR_STATUS.get(type(exc), 500)
    return JSONResponse(status_code=code, content={"detail": str(exc)})

app.include_router(records.router, prefix="/api/records", tags=["records"])
app.include_router(certificates.router, prefix="/api/certificates", tags=["certificates"])
app.include_router(assets.router, prefix="/api/assets", tags=["assets"])

@app.get("/")
def root():
    return {"ok": True, "service": "no-dues-api"}

@app.get("/api/health", response_model=HealthStatus)
def health(store: RecordStore = Depends(get_store)):
    return HealthStatus(backend=store.backend, assets_degraded=store.assets_degraded)
