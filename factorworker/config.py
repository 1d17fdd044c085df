# factorworker/config.py
# Everything tunable comes from the environment.

import os

REDIS_URL     = os.getenv("REDIS_URL", "redis://localhost:6379/0")
QUEUE_NAME    = os.getenv("FACTOR_QUEUE", "factor")
JOB_TIMEOUT   = int(os.getenv("FACTOR_JOB_TIMEOUT", str(60*60*12)))  # 12h
RESULT_TTL    = int(os.getenv("FACTOR_RESULT_TTL", str(60*60*24)))
ROUNDS        = int(os.getenv("FACTOR_ROUNDS", "5"))
PRIME_LIMIT   = int(os.getenv("FACTOR_PRIME_LIMIT", "100000"))
MAX_DIGITS    = int(os.getenv("FACTOR_MAX_DIGITS", "1000"))
MAX_SYNC_DIGITS = int(os.getenv("FACTOR_MAX_SYNC_DIGITS", "40"))
SYNC_BUDGET_MS  = int(os.getenv("FACTOR_SYNC_BUDGET_MS", "3000"))  # inline /api/factor cap
LOG_LEVEL     = os.getenv("FACTOR_LOG_LEVEL", "INFO")
