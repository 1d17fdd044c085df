"""RQ job payloads."""

from rq.job import Job

from factorworker.worker import enqueue_factorization, factor_job


def test_success_payload() -> None:
    res = factor_job("360")
    assert res["status"] == "success"
    assert res["original"] == "360"
    assert res["factors"] == {"2": 3, "3": 2, "5": 1}
    assert list(res["factors"]) == ["2", "3", "5"]
    assert float(res["time"]) >= 0.0


def test_keys_sorted_numerically() -> None:
    n = 3 * 1000000007 * 1000000009 * 7
    res = factor_job(str(n))
    assert list(res["factors"]) == ["3", "7", "1000000007", "1000000009"]


def test_original_is_echoed() -> None:
    res = factor_job(" 17\n")
    assert res["original"] == " 17\n"
    assert res["factors"] == {"17": 1}


def test_one() -> None:
    assert factor_job("1")["factors"] == {}


def test_parse_errors_have_no_partial_result() -> None:
    for bad in ("", "abc", "12a", "-5", "3.0", "1e9", "0", None, "１２"):
        res = factor_job(bad)
        assert res["status"] == "error"
        assert res["message"].startswith("Invalid number")
        assert "factors" not in res


def test_bytes_input() -> None:
    res = factor_job(b"360")
    assert res["status"] == "success"
    assert res["original"] == "360"


def test_runs_through_rq(sync_queue, redis_conn) -> None:
    job = enqueue_factorization("1000000016000000063", queue=sync_queue, rounds=10)
    assert job.is_finished
    res = job.return_value()
    assert res["factors"] == {"1000000007": 1, "1000000009": 1}

    stored = Job.fetch(job.id, connection=redis_conn)
    assert stored.meta["digits"] == 19
    assert stored.meta["rounds"] == 10
    assert "submitted" in stored.meta


def test_rq_error_payload(sync_queue) -> None:
    job = enqueue_factorization("twelve", queue=sync_queue)
    assert job.is_finished
    assert job.return_value()["status"] == "error"


def test_rounds_validation() -> None:
    n = str(1000000007 * 1000000009)
    for bad in (0, -1, "5", 2.5, True):
        res = factor_job(n, rounds=bad)
        assert res["status"] == "error"
        assert res["message"].startswith("Invalid rounds")
        assert "factors" not in res


def test_rounds_default_and_explicit() -> None:
    n = str(1000000007 * 1000000009)
    assert factor_job(n)["status"] == "success"
    assert factor_job(n, rounds=1)["factors"] == {"1000000007": 1, "1000000009": 1}


def test_bad_rounds_through_rq(sync_queue) -> None:
    job = enqueue_factorization("360", queue=sync_queue, rounds=-3)
    assert job.is_finished
    assert job.return_value()["status"] == "error"
