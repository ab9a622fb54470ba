"""
FastAPI endpoint tests for the Number Words API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

from number_words import __version__

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["languages_loaded"] == 11


class TestLanguagesEndpoint:
    def test_lists_every_language(self) -> None:
        data = client.get("/languages").json()
        codes = {item["code"] for item in data}
        assert {"en", "ru", "zh", "he", "hi"} <= codes

    def test_reports_options_and_ordinals(self) -> None:
        data = {item["code"]: item for item in client.get("/languages").json()}
        assert data["ru"]["options"] == ["gender"]
        assert data["en"]["ordinals"] is True
        assert data["ru"]["ordinals"] is False
        assert data["en"]["max_digits"] == 66


class TestConvertEndpoint:
    def test_default_language(self) -> None:
        resp = client.post("/convert", json={"value": 1234567})
        assert resp.status_code == 200
        data = resp.json()
        assert data["lang"] == "en"
        assert data["words"] == "one million two hundred thirty-four thousand five hundred sixty-seven"

    def test_string_value_keeps_precision(self) -> None:
        data = client.post("/convert", json={"value": "12345678901234567890"}).json()
        assert data["words"].startswith("twelve quintillion")
        assert data["value"] == "12345678901234567890"

    def test_json_float(self) -> None:
        data = client.post("/convert", json={"value": 17.42, "lang": "lt"}).json()
        assert data["words"] == "septyniolika kablelis keturiasdešimt du"

    def test_options_and_region(self) -> None:
        data = client.post(
            "/convert",
            json={"value": 2, "lang": "ru-RU", "options": {"gender": "feminine"}},
        ).json()
        assert data["lang"] == "ru"
        assert data["words"] == "две"

    def test_bad_number_is_422_with_code(self) -> None:
        resp = client.post("/convert", json={"value": "12abc"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == "INVALID_NUMBER_FORMAT"
        assert "12abc" in body["message"]

    def test_unknown_language(self) -> None:
        resp = client.post("/convert", json={"value": 1, "lang": "xx"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "UNSUPPORTED_LANGUAGE"

    def test_bad_option(self) -> None:
        resp = client.post("/convert", json={"value": 1, "lang": "pl", "options": {"gender": "x"}})
        assert resp.status_code == 422
        assert resp.json()["code"] == "UNSUPPORTED_OPTION"

    def test_too_large(self) -> None:
        resp = client.post("/convert", json={"value": "1" + "0" * 80})
        assert resp.status_code == 422
        assert resp.json()["details"]["max_digits"] == 66

    def test_missing_value_is_schema_error(self) -> None:
        resp = client.post("/convert", json={"lang": "en"})
        assert resp.status_code == 422
        assert "detail" in resp.json()

    def test_json_boolean_is_schema_error(self) -> None:
        for flag in (True, False):
            resp = client.post("/convert", json={"value": flag})
            assert resp.status_code == 422
            assert "detail" in resp.json()

    def test_boolean_string_is_bad_number(self) -> None:
        resp = client.post("/convert", json={"value": "true"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_NUMBER_FORMAT"

    def test_huge_exponent_is_magnitude_error(self) -> None:
        resp = client.post("/convert", json={"value": "1e300000000"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "MAGNITUDE_OUT_OF_RANGE"


class TestOrdinalEndpoint:
    def test_english_ordinal(self) -> None:
        data = client.post("/ordinal", json={"value": 21}).json()
        assert data["words"] == "twenty-first"

    def test_zero_rejected(self) -> None:
        resp = client.post("/ordinal", json={"value": 0})
        assert resp.status_code == 422
        assert resp.json()["code"] == "ORDINAL_DOMAIN_ERROR"

    def test_polish_ordinal(self) -> None:
        data = client.post("/ordinal", json={"value": 21, "lang": "pl"}).json()
        assert data["words"] == "dwudziesty pierwszy"

    def test_boolean_rejected(self) -> None:
        resp = client.post("/ordinal", json={"value": True})
        assert resp.status_code == 422
