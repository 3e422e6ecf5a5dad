import os
from dotenv import load_dotenv

# --------------------------------
# Environment Variables
# --------------------------------
# Read before logging is configured, so failures raise instead of logging.
load_dotenv()

BACKEND_BASE_URL = os.getenv("HEALTHCARE_BACKEND_URL", "http://localhost:9090/healthcare/doctor")

SERVICE_HOST = os.getenv("SERVICE_HOST", "0.0.0.0")

_port = os.getenv("SERVICE_PORT", "9092")
try:
    SERVICE_PORT = int(_port)
except ValueError:
    raise ValueError(f"SERVICE_PORT must be an integer, got {_port!r}") from None

LOG_DIR = os.getenv("LOG_DIR")  # None -> <project>/logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
