# wms_api/main.py
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from wms_api.config import settings
from wms_api.database import init_db
from wms_api.exceptions import WMSError
from wms_api.utils.logger import configure_logging

# Router imports
from wms_api.routes.localities import router as localities_router
from wms_api.routes.sellers import router as sellers_router
from wms_api.routes.buyers import router as buyers_router
from wms_api.routes.products import router as products_router
from wms_api.routes.warehouses import router as warehouses_router
from wms_api.routes.sections import router as sections_router
from wms_api.routes.employees import router as employees_router
from wms_api.routes.product_batches import router as product_batches_router
from wms_api.routes.inbound_orders import router as inbound_orders_router
from wms_api.routes.carriers import router as carriers_router
from wms_api.routes.purchase_orders import router as purchase_orders_router
from wms_api.routes.logs import router as logs_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("%s started, routes under %s", settings.APP_TITLE, settings.API_PREFIX)
    yield


app = FastAPI(title=settings.APP_TITLE, version="1.0.0", lifespan=lifespan)

# CORS: local frontends plus an optional deployed one
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173"
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WMSError)
async def wms_error_handler(request: Request, exc: WMSError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Router registration
for r in (
    localities_router,
    sellers_router,
    buyers_router,
    products_router,
    warehouses_router,
    sections_router,
    employees_router,
    product_batches_router,
    inbound_orders_router,
    carriers_router,
    purchase_orders_router,
    logs_router,
):
    app.include_router(r, prefix=settings.API_PREFIX)


@app.get("/")
def read_root():
    return {"message": f"{settings.APP_TITLE} is running"}
