# factorworker/worker.py
# RQ side: the job function, enqueue helper, and the worker entry point.

from __future__ import annotations
import logging, time
from typing import Optional

from redis import Redis
from rq import Queue, Worker, get_current_job
from rq.job import Job

from . import config
from .engine import factorize
from .errors import FactorError
from .parse import parse_positive

log = logging.getLogger(__name__)

def get_connection(url: Optional[str] = None) -> Redis:
    return Redis.from_url(url or config.REDIS_URL)

def get_queue(connection: Optional[Redis] = None, **kwargs) -> Queue:
    return Queue(config.QUEUE_NAME, connection=connection or get_connection(),
                 default_timeout=config.JOB_TIMEOUT, **kwargs)

def factor_job(text, rounds: Optional[int] = None) -> dict:
    """
    Factor one decimal string. Returns the success or error payload; never a
    partial factorization.
    """
    if rounds is None:
        rounds = config.ROUNDS
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
        log.info("rejected rounds=%r", rounds)
        return {"status": "error", "message": f"Invalid rounds: {rounds!r} (must be an integer >= 1)"}
    try:
        n = parse_positive(text)
    except FactorError as e:
        log.info("rejected input: %s", e)
        return {"status": "error", "message": f"Invalid number: {e}"}

    job = get_current_job()
    if job is not None:
        job.meta.update({"digits": len(str(n)), "bits": n.bit_length(), "rounds": rounds})
        job.save_meta()

    t0 = time.perf_counter()
    try:
        factors = factorize(n, rounds=rounds, prime_limit=config.PRIME_LIMIT)
    except FactorError as e:
        log.error("factorization of %d-digit n failed: %s", len(str(n)), e)
        return {"status": "error", "message": f"Factorization failed: {e}"}
    dt_ms = (time.perf_counter() - t0) * 1000

    log.info("factored %d-digit n into %d distinct primes in %.2f ms",
             len(str(n)), len(factors), dt_ms)
    return {
        "status": "success",
        "original": text if isinstance(text, str) else str(n),
        "factors": {str(p): e for p, e in factors.items()},
        "time": f"{dt_ms:.2f}",
    }

def enqueue_factorization(text: str, queue: Optional[Queue] = None,
                          rounds: Optional[int] = None, **meta) -> Job:
    q = queue or get_queue()
    return q.enqueue(factor_job, text, rounds, result_ttl=config.RESULT_TTL,
                     meta={"submitted": time.time(), **meta})

def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    conn = get_connection()
    q = get_queue(conn)
    log.info("worker listening on %s (%s)", q.name, config.REDIS_URL)
    Worker([q], connection=conn).work()

if __name__ == "__main__":
    main()
