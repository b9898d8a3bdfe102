# cartwalk/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DISCOUNT_FACTOR = _float_env("DISCOUNT_FACTOR", 0.85)
