"""Tests for the parse/compose HTTP endpoints."""

from fastapi.testclient import TestClient


def test_parse_returns_location(client: TestClient) -> None:
    response = client.post("/parse", json={"uri": "geo:66,30;u=6.500;FOo=this%2dthat;Bar"})
    assert response.status_code == 200
    assert response.json() == {
        "latitude": 66.0,
        "longitude": 30.0,
        "altitude": None,
        "crs": "wgs84",
        "uncertainty": 6.5,
        "parameters": {"foo": "this-that", "bar": ""},
    }


def test_parse_strict_policy(client: TestClient) -> None:
    response = client.post(
        "/parse", json={"uri": "geo:1,2;FOo=x", "lowercase_label_text": False}
    )
    assert response.json()["parameters"] == {"FOo": "x"}


def test_parse_rejects_duplicate_crs(client: TestClient) -> None:
    response = client.post("/parse", json={"uri": "geo:1,2;crs=wgs84;crs=wgs84"})
    assert response.status_code == 422
    assert response.json()["detail"] == {
        "error": "DUPLICATE_CRS",
        "message": "duplicate crs parameter",
        "position": 17,
    }


def test_parse_rejects_syntax_error(client: TestClient) -> None:
    response = client.post("/parse", json={"uri": "geo:1,2,"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "NO_MATCH"


def test_like(client: TestClient) -> None:
    assert client.get("/like", params={"uri": "GEO:x"}).json() == {"like_geo_uri": True}
    assert client.get("/like", params={"uri": "geo"}).json() == {"like_geo_uri": False}


def test_compose(client: TestClient) -> None:
    response = client.post(
        "/compose",
        json={
            "latitude": 66,
            "longitude": 30,
            "altitude": 100,
            "crs": "ABC",
            "uncertainty": 6.5,
            "parameters": {"foo": "val", "bar": ""},
        },
    )
    assert response.status_code == 200
    assert response.json() == {"uri": "geo:66,30,100;crs=ABC;u=6.5;foo=val;bar"}


def test_compose_policy_flags(client: TestClient) -> None:
    response = client.post(
        "/compose",
        json={
            "latitude": 1,
            "longitude": 2,
            "parameters": {"note": "a b"},
            "suppress_default_crs": False,
            "percent_encode_values": True,
        },
    )
    assert response.json() == {"uri": "geo:1,2;crs=wgs84;note=a%20b"}


def test_compose_rejects_negative_uncertainty(client: TestClient) -> None:
    response = client.post(
        "/compose", json={"latitude": 1, "longitude": 2, "uncertainty": -1}
    )
    assert response.status_code == 422


def test_compose_rejects_infinite_coordinate(client: TestClient) -> None:
    response = client.post(
        "/compose",
        content='{"latitude": Infinity, "longitude": 2}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
