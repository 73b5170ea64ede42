"""HTTP surface for a browser UI driving the Webex poster.

Usage:
    uvicorn webex_poster.main:app --port 8080
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webex_poster.api.v1 import router as api_router
from webex_poster.config import settings
from webex_poster.logging import setup_logging

setup_logging()
app = FastAPI(title="Webex Poster")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("webex_poster.main:app", host="127.0.0.1", port=settings.PORT)
