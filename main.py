# main.py
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catering.api.errors import register_exception_handlers
from catering.api.router import api_router
from catering.core.config import settings
from catering.core.database import Base, engine
from catering.models import sql_models  # noqa: F401  registers the tables

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Catering storefront and back-office API",
    version="1.0"
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix="/api")

if settings.AUTO_CREATE_TABLES:
    Base.metadata.create_all(bind=engine)


@app.get("/")
def read_root():
    return {"status": "Catering Orders API online", "docs": "/docs"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
