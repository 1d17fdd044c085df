# factorworker/api.py
# HTTP surface: synchronous factoring for small inputs, RQ jobs for the rest.

from __future__ import annotations
import time

from flask import Blueprint, current_app, jsonify, request
from redis.exceptions import RedisError
from rq.exceptions import NoSuchJobError
from rq.job import Job

from . import config
from .engine import factorize, format_factors
from .errors import FactorTimeout, ParseError
from .parse import parse_positive
from .worker import enqueue_factorization, get_queue

factor_bp = Blueprint("factor_bp", __name__)

# ------------------ helpers ------------------
def _queue():
    q = current_app.extensions.get("factor_queue")
    if q is None:
        q = current_app.extensions["factor_queue"] = get_queue()
    return q

def _job_dict(job: Job) -> dict:
    """Status plus, once finished, the factor_job payload."""
    status = job.get_status()
    d = {"job_id": job.id, "status": status, "meta": job.meta or {}}
    if status == "finished":
        d["result"] = job.return_value()
    elif status == "failed":
        res = job.latest_result()
        d["error"] = (res.exc_string or "").strip().rsplit("\n", 1)[-1] if res else None
    return d

def _payload() -> dict:
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form

def _rounds(data) -> int:
    try:
        rounds = int(data.get("rounds", config.ROUNDS))
    except (TypeError, ValueError):
        raise ParseError("rounds must be an integer")
    if not 1 <= rounds <= 64:
        raise ParseError("rounds must be between 1 and 64")
    return rounds

def _time_ms(data) -> int:
    try:
        time_ms = int(data.get("time_ms", config.SYNC_BUDGET_MS))
    except (TypeError, ValueError):
        raise ParseError("time_ms must be an integer")
    if time_ms < 0:
        raise ParseError("time_ms must be >= 0")
    return min(time_ms, config.SYNC_BUDGET_MS)

@factor_bp.errorhandler(ParseError)
def _bad_input(e):
    return jsonify({"status": "error", "error": str(e)}), 400

# ------------------ API ------------------
@factor_bp.get("/api/health")
def health():
    q = _queue()
    ok, msg = True, "ok"
    try:
        q.connection.ping()
        size = q.count
    except RedisError as e:
        ok, msg, size = False, f"redis error: {e.__class__.__name__}", None
    return jsonify({"ok": ok, "msg": msg, "queue": {"name": q.name, "size": size}, "time": int(time.time())})

@factor_bp.post("/api/factor")
def factor_now():
    t0 = time.time()
    data = _payload()
    nstr = str(data.get("n", "")).strip()
    n = parse_positive(nstr)
    rounds = _rounds(data)
    time_ms = _time_ms(data)
    if len(str(n)) > config.MAX_SYNC_DIGITS:
        return jsonify({"status": "error",
                        "error": f"Max {config.MAX_SYNC_DIGITS} digits here; submit a job instead."}), 400
    try:
        factors = factorize(n, rounds=rounds, prime_limit=config.PRIME_LIMIT, max_ms=time_ms)
    except FactorTimeout:
        d = jsonify({"status": "timeout", "original": nstr, "time_ms": time_ms,
                     "note": "Not finished within the inline budget; submit a job instead."})
    else:
        d = jsonify({
            "status": "success",
            "original": nstr,
            "factors": {str(p): e for p, e in factors.items()},
            "pretty": f"{n} = {format_factors(factors)}",
        })
    d.headers["X-Compute-ms"] = str(int((time.time() - t0) * 1000))
    return d

@factor_bp.post("/api/factor/submit")
def factor_submit():
    data = _payload()
    nstr = str(data.get("n", "")).strip()
    n = parse_positive(nstr)
    rounds = _rounds(data)
    digits = len(str(n))
    if digits > config.MAX_DIGITS:
        return jsonify({"status": "error", "error": f"Max {config.MAX_DIGITS} digits."}), 400

    q = _queue()
    job = enqueue_factorization(nstr, queue=q, rounds=rounds, digits=digits)
    ids = q.get_job_ids()
    pos = ids.index(job.id) + 1 if job.id in ids else 0
    note = "Numbers with two large prime factors can take a very long time." if n.bit_length() >= 200 else ""
    return jsonify({"job_id": job.id, "status": job.get_status(), "digits": digits,
                    "queue_position": pos, "note": note}), 202

@factor_bp.get("/api/job/<job_id>")
def job_status(job_id):
    try:
        job = Job.fetch(job_id, connection=_queue().connection)
    except NoSuchJobError:
        return jsonify({"error": "unknown job"}), 404
    return jsonify(_job_dict(job))

@factor_bp.post("/api/job/<job_id>/abort")
def job_abort(job_id):
    conn = _queue().connection
    try:
        job = Job.fetch(job_id, connection=conn)
    except NoSuchJobError:
        return jsonify({"error": "unknown job"}), 404
    if job.is_finished or job.is_failed:
        return jsonify({"ok": False, "job_id": job_id, "status": job.get_status()}), 409
    if job.is_started:
        from rq.command import send_stop_job_command
        send_stop_job_command(conn, job_id)
    else:
        job.cancel()
    return jsonify({"ok": True, "job_id": job_id, "status": job.get_status(refresh=True)})
