from typing import List
from fastapi import APIRouter
from fastapi.responses import JSONResponse
import logging
from models.doctor import Doctor
from services.doctor_service import DoctorService, CategoryNotFoundError
from constants.query_status import MESSAGES
from utils.responses import text_response

router = APIRouter(prefix="/healthcare")
logger = logging.getLogger("querydoctor")

#---------------- Query doctors by category ----------------#
@router.get(
    "/querydoctor/{category}",
    response_class=JSONResponse,
    responses={200: {"model": List[Doctor]}},
)
async def query_doctor(category: str):
    logger.info("Querying doctors for category: %s", category)
    try:
        doctors = await DoctorService.fetch_by_category(category)
        return JSONResponse(content=doctors)
    except CategoryNotFoundError:
        logger.warning("Category not found: %s", category)
        not_found = MESSAGES["CATEGORY_NOT_FOUND"]
        return text_response(
            not_found["detail"].format(category=category),
            not_found["status_code"],
        )
    except Exception as e:
        logger.exception("Error querying doctors for %s: %s", category, e)
        return text_response(str(e), MESSAGES["BACKEND_FAILED"]["status_code"])
