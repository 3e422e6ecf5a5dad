from fastapi.responses import JSONResponse, PlainTextResponse
from constants.query_status import STATUS

def health_response(service: str, status_code: int = 200):
    """
    Liveness response, does not touch the backend
    """
    return JSONResponse(
        content={"service": service, "status": STATUS["HEALTHY"]},
        status_code=status_code
    )

def text_response(message: str, status_code: int):
    """
    Plain text error response
    """
    return PlainTextResponse(content=message, status_code=status_code)
