import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

MAX_TOKEN_BATCH = int(os.getenv("SECUREVOTE_MAX_TOKEN_BATCH", "10000"))
TOKEN_CHUNK_SIZE = int(os.getenv("SECUREVOTE_TOKEN_CHUNK_SIZE", "500"))
ENTROPY_THRESHOLD = float(os.getenv("SECUREVOTE_ENTROPY_THRESHOLD", "0.7"))
LOG_LEVEL = os.getenv("SECUREVOTE_LOG_LEVEL", "WARNING")


def configure_logging(level: Optional[str] = None) -> None:
    """Configura el logger raíz del paquete con el nivel indicado o el de entorno."""

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=(level or LOG_LEVEL).upper(),
    )
