import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from config import APP_TITLE, APP_DESCRIPTION, APP_VERSION, API_PREFIX, NBA_CDN_BASE_URL, LOG_LEVEL
from routers.api import router as api_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, version=APP_VERSION)

allowed_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router)

@app.get("/")
async def root():
    """Service metadata and where its game queries live."""
    return {
        "name": APP_TITLE,
        "version": APP_VERSION,
        "docs": app.docs_url,
        "api": API_PREFIX,
        "upstream": NBA_CDN_BASE_URL,
        "routes": sorted(
            route.path for route in api_router.routes if route.path.startswith(API_PREFIX)
        ),
    }

@app.get("/health")
async def health():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
