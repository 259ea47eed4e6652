import logging
import random
import time as _pytime
from gspread.exceptions import APIError

logger = logging.getLogger(__name__)

_RETRY_STATUS = (429, 500, 502, 503, 504)

def _is_quota_error(e: Exception) -> bool:
    s = str(e).lower()
    return "429" in s or "quota exceeded" in s

def _retry_429(fn, *args, retries: int = 5, backoff: float = 0.8, **kwargs):
    for i in range(retries):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if _is_quota_error(e):
                logger.debug("quota hit on %s, retry %d/%d", getattr(fn, "__name__", fn), i + 1, retries)
                _pytime.sleep(backoff * (2 ** i))
                continue
            raise
    return fn(*args, **kwargs)

def with_backoff(fn, *args, attempts: int = 6, base: float = 0.6, **kwargs):
    """Exponential backoff + jitter for gspread calls (handles 429/5xx)."""
    for i in range(attempts):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            sc = getattr(getattr(e, "response", None), "status_code", None)
            retryable = (isinstance(e, APIError) and sc in _RETRY_STATUS) or _is_quota_error(e)
            if not retryable or i == attempts - 1:
                raise
            _pytime.sleep(base * (2 ** i) + random.uniform(0, 0.4))
