"""Flask API with an inline RQ queue."""

import time

import pytest

from factorworker import config
from factorworker.app import create_app


@pytest.fixture
def client(sync_queue):
    app = create_app(queue=sync_queue)
    app.config["TESTING"] = True
    return app.test_client()


def test_factor_inline(client) -> None:
    r = client.post("/api/factor", json={"n": "360"})
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "success"
    assert body["factors"] == {"2": 3, "3": 2, "5": 1}
    assert body["pretty"] == "360 = 2^3 * 3^2 * 5"
    assert "X-Compute-ms" in r.headers


def test_factor_inline_form(client) -> None:
    r = client.post("/api/factor", data={"n": "17"})
    assert r.get_json()["factors"] == {"17": 1}


@pytest.mark.parametrize("n", ["", "abc", "-1", "0", "12.5"])
def test_factor_inline_bad_input(client, n) -> None:
    r = client.post("/api/factor", json={"n": n})
    assert r.status_code == 400
    assert r.get_json()["status"] == "error"


def test_factor_inline_bad_rounds(client) -> None:
    r = client.post("/api/factor", json={"n": "15", "rounds": "many"})
    assert r.status_code == 400
    r = client.post("/api/factor", json={"n": "15", "rounds": 0})
    assert r.status_code == 400


def test_factor_inline_too_long(client) -> None:
    r = client.post("/api/factor", json={"n": "9" * (config.MAX_SYNC_DIGITS + 1)})
    assert r.status_code == 400


def test_submit_and_poll(client) -> None:
    r = client.post("/api/factor/submit", json={"n": "1000000016000000063"})
    assert r.status_code == 202
    job_id = r.get_json()["job_id"]

    r = client.get(f"/api/job/{job_id}")
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "finished"
    assert set(body) == {"job_id", "status", "meta", "result"}
    assert body["result"]["factors"] == {"1000000007": 1, "1000000009": 1}
    assert body["meta"]["digits"] == 19


def test_submit_rejects_garbage(client) -> None:
    r = client.post("/api/factor/submit", json={"n": "0x1f"})
    assert r.status_code == 400


def test_submit_too_long(client) -> None:
    r = client.post("/api/factor/submit", json={"n": "7" * (config.MAX_DIGITS + 1)})
    assert r.status_code == 400


def test_unknown_job(client) -> None:
    assert client.get("/api/job/nope").status_code == 404
    assert client.post("/api/job/nope/abort").status_code == 404


def test_abort_finished_job(client) -> None:
    job_id = client.post("/api/factor/submit", json={"n": "360"}).get_json()["job_id"]
    r = client.post(f"/api/job/{job_id}/abort")
    assert r.status_code == 409
    assert r.get_json()["ok"] is False


def test_health(client) -> None:
    body = client.get("/api/health").get_json()
    assert body["ok"] is True
    assert body["queue"]["name"] == "factor-test"


BALANCED_27 = str(10000000000037 * 10000000000051)


def test_factor_inline_times_out(client) -> None:
    r = client.post("/api/factor", json={"n": BALANCED_27, "time_ms": 0})
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "timeout"
    assert "factors" not in body
    assert "X-Compute-ms" in r.headers


def test_factor_inline_budget_is_capped(client, monkeypatch) -> None:
    monkeypatch.setattr(config, "SYNC_BUDGET_MS", 50)
    t0 = time.perf_counter()
    r = client.post("/api/factor", json={"n": BALANCED_27, "time_ms": 10**9})
    assert r.get_json()["status"] == "timeout"
    assert r.get_json()["time_ms"] == 50
    assert time.perf_counter() - t0 < 5


def test_factor_inline_bad_time_ms(client) -> None:
    assert client.post("/api/factor", json={"n": "15", "time_ms": "soon"}).status_code == 400
    assert client.post("/api/factor", json={"n": "15", "time_ms": -1}).status_code == 400


def test_leading_zeros_do_not_count_as_digits(client) -> None:
    padded = "0" * (config.MAX_DIGITS + 5) + "360"
    r = client.post("/api/factor", json={"n": padded})
    assert r.status_code == 200
    assert r.get_json()["factors"] == {"2": 3, "3": 2, "5": 1}

    r = client.post("/api/factor/submit", json={"n": padded})
    assert r.status_code == 202
    assert r.get_json()["digits"] == 3
