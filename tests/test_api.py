import logging

import pytest

from clrsKit.web import api
from clrsKit.web.dashboard import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_root_and_health(client):
    root = client.get("/").get_json()
    assert root["ok"] is True
    assert "/api/sort" in root["endpoints"]
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_config(client):
    body = client.get("/api/config").get_json()
    assert body["cache_backend"] == "memory"
    assert body["bench_defaults"]["repeats"] == 3


def test_algorithms_listing(client):
    body = client.get("/api/algorithms").get_json()
    names = [a["name"] for a in body["algorithms"]]
    assert "quick_hoare" in names and "kadane" in names

    sub = client.get("/api/algorithms?family=subarray").get_json()
    assert [a["name"] for a in sub["algorithms"]] == ["kadane", "divide_conquer"]


def test_sort_endpoint(client):
    resp = client.post("/api/sort", json={"algorithm": "heap", "values": [3, -1, 2.5, 0]})
    assert resp.status_code == 200
    assert resp.get_json() == {"algorithm": "heap", "input": [3, -1, 2.5, 0], "sorted": [-1, 0, 2.5, 3]}


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ({"algorithm": "bogo", "values": [1]}, "Unknown algorithm"),
        ({"algorithm": "kadane", "values": [1]}, "Unknown algorithm"),
        ({"values": [1]}, "'algorithm' is required"),
        ({"algorithm": "merge", "values": "1,2"}, "JSON array"),
        ({"algorithm": "merge", "values": [1, "x"]}, "numbers only"),
        ({"algorithm": "count", "values": [1, 2.5]}, "integers only"),
        ({"algorithm": "count", "values": [0, 20_000_000, 1]}, "value range"),
    ],
)
def test_sort_endpoint_client_errors(client, payload, fragment):
    resp = client.post("/api/sort", json=payload)
    assert resp.status_code == 400
    assert fragment in resp.get_json()["error"]


def test_sort_endpoint_requires_json_object(client):
    resp = client.post("/api/sort", data="not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["category"] == "request"


def test_max_subarray_endpoint(client):
    resp = client.post("/api/max-subarray", json={"values": [-2, 1, -3, 4, -1, 2, 1, -5, 4]})
    assert resp.get_json() == {"method": "kadane", "subarray": [4, -1, 2, 1], "sum": 6}

    resp = client.post("/api/max-subarray", json={"values": [-1, -2], "method": "divide_conquer"})
    assert resp.get_json() == {"method": "divide_conquer", "subarray": None, "sum": 0}


def test_benchmark_endpoint(client):
    resp = client.get("/api/benchmark?algorithms=insertion,merge&sizes=10,20&repeats=1&seed=3")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["params"]["algorithms"] == ["insertion", "merge"]
    assert len(body["results"]) == 4
    assert all(row["verified"] for row in body["results"])
    assert {g["algorithm"] for g in body["growth"]} == {"insertion", "merge"}


@pytest.mark.parametrize(
    "query",
    [
        "sizes=10",
        "sizes=a,b",
        "sizes=10,99999",
        "sizes=10,20&repeats=100000",
        "repeats=x",
        "algorithms=nope&sizes=10,20",
    ],
)
def test_benchmark_endpoint_client_errors(client, query):
    resp = client.get(f"/api/benchmark?{query}")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_count_range_limit_leaves_other_sorts_alone(client):
    resp = client.post("/api/sort", json={"algorithm": "merge", "values": [0, 20_000_000, 1]})
    assert resp.status_code == 200
    assert resp.get_json()["sorted"] == [0, 1, 20_000_000]

    limit = client.get("/api/config").get_json()["max_count_range"]
    resp = client.post("/api/sort", json={"algorithm": "count", "values": [limit, 0]})
    assert resp.status_code == 200


def test_unexpected_error_is_logged_and_hidden(client, monkeypatch, caplog):
    def broken(name, values):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(api, "run_sort", broken)
    # configure_logging turns propagation off for the package logger
    monkeypatch.setattr(logging.getLogger("clrsKit"), "propagate", True)
    with caplog.at_level(logging.ERROR, logger="clrsKit.web.api"):
        resp = client.post("/api/sort", json={"algorithm": "merge", "values": [2, 1]})

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "internal error"}
    record = next(r for r in caplog.records if r.name == "clrsKit.web.api")
    assert record.levelno == logging.ERROR
    assert "/api/sort" in record.getMessage()
    assert record.exc_info[0] is RuntimeError
