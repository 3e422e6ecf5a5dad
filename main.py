from log_config.logging_config import setup_logging
setup_logging()
from fastapi import FastAPI
from routers import query_doctor, health
from fastapi.middleware.cors import CORSMiddleware
from config import SERVICE_HOST, SERVICE_PORT

app = FastAPI(title="Doctor Query Service")

# ✅ Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(query_doctor.router, tags=["Query Doctor"])
app.include_router(health.router, tags=["Health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVICE_HOST, port=SERVICE_PORT)
