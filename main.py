import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from data_source import CORS_ALLOW_ORIGINS, SCHOOLS_DATA_PATH
from assessment.routes import router as assessment_router

logging.basicConfig(level=logging.INFO)
logging.info(f"App starting with SCHOOLS_DATA_PATH={SCHOOLS_DATA_PATH}")

app = FastAPI(title="School Infrastructure Health")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assessment_router)


@app.get("/", tags=["meta"])
def root():
    return {"service": "school-infrastructure-health", "docs": "/docs"}
