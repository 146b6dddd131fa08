import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL

# Routers
from routers.marking import router as marking_router
from routers.problems import router as problems_router

logger = logging.getLogger("mathbuddy")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="MathBuddy – Problem API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


# Register routers
app.include_router(problems_router)  # /topics, /problems/...
app.include_router(marking_router)  # /check, /check-batch, /options
