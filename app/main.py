from fastapi import FastAPI
from app.api.routes.parse import router as parse_router

app = FastAPI(
    title="Resume Structurer",
    description="Deterministic, heuristic resume parsing service that turns free-form resume text into a sparse structured record",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-structurer", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
