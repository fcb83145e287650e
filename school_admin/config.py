# /school_admin/config.py

import os
import logging
from dotenv import load_dotenv

# --- CONFIGURATION ---
load_dotenv()

# The base URL of the school records backend. The default matches a local
# backend started on its standard port.
API_BASE_URL = os.getenv("SCHOOL_API_URL", "http://localhost:8080/api")

# Seconds before a transient error/success message clears itself.
MESSAGE_TIMEOUT_SECONDS = float(os.getenv("SCHOOL_API_MESSAGE_TIMEOUT", "3"))

LOG_LEVEL = os.getenv("SCHOOL_API_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configures root logging for an application embedding the console."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
