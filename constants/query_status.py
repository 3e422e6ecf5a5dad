# constants/query_status.py
from fastapi import status

STATUS = {
    "HEALTHY": "healthy",
}

MESSAGES = {
    "CATEGORY_NOT_FOUND": {
        "status_code": status.HTTP_404_NOT_FOUND,
        "detail": "category not found: {category}",
    },
    "BACKEND_FAILED": {
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
    },
}
