from fastapi import APIRouter
from utils.responses import health_response

router = APIRouter()

SERVICE_NAME = "doctor-query-service"

#---------------- Liveness ----------------#
@router.get("/health")
async def health():
    return health_response(SERVICE_NAME)
