import math
import os
from dataclasses import dataclass
from typing import Optional

VERSION = "0.1.0"
PROJECT_URL = "https://github.com/ekalinin/awsping"
USER_AGENT = f"AwsPing/{VERSION} (+{PROJECT_URL})"

# {code} is the region code, {token} the cache-busting query value
PING_URL = "http://dynamodb.{code}.amazonaws.com/ping?x={token}"
TOKEN_LENGTH = 13

@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    timeout: Optional[float] = None  # seconds; None keeps aiohttp's default

def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"AWSPING_TIMEOUT must be positive, got {raw!r}")
    return value

def load_settings(environ=None) -> Settings:
    """Read settings from the environment (AWSPING_LOG_LEVEL, AWSPING_TIMEOUT)."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=env.get("AWSPING_LOG_LEVEL", "WARNING").upper(),
        timeout=_parse_timeout(env.get("AWSPING_TIMEOUT")),
    )
