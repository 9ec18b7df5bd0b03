# -*- coding: utf-8 -*-
"""
Tests for RentalApiClient.

Tests cover:
- Request building (URL, params, headers, body)
- Envelope normalisation of successful bodies
- HTTP and network failures folded into failed envelopes
"""
import json

import pytest
import requests

from services.api_client import ApiConfig, RentalApiClient, get_api_client, reset_api_client


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body
        self.text = json.dumps(body) if body is not None else ""

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Answers every request with the next queued response (or exception)."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.requests = []

    def request(self, **kwargs):
        self.requests.append(kwargs)
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


def make_client(*answers, token="secret"):
    session = FakeSession(*answers)
    config = ApiConfig(base_url="http://backend:3000/", token=token, timeout=5, verify_ssl=True)
    return RentalApiClient(config, session=session), session


class TestRequests:
    """What goes over the wire."""

    def test_search_customers_request(self):
        client, session = make_client(FakeResponse(body={"success": True, "data": {"customers": []}}))
        client.search_customers("Sara", 20)

        sent = session.requests[0]
        assert sent["method"] == "GET"
        assert sent["url"] == "http://backend:3000/api/customers"
        assert sent["params"] == {"search": "Sara", "limit": 20}
        assert sent["headers"]["Authorization"] == "Bearer secret"
        assert sent["timeout"] == 5

    def test_no_token_no_authorization_header(self):
        client, session = make_client(FakeResponse(body={"success": True, "data": []}), token="")
        client.get_inspectors()
        assert "Authorization" not in session.requests[0]["headers"]

    def test_set_access_token(self):
        client, session = make_client(FakeResponse(body={"success": True, "data": []}), token="")
        client.set_access_token("fresh")
        client.get_branches()
        assert session.requests[0]["headers"]["Authorization"] == "Bearer fresh"

    def test_create_and_update_contract(self):
        client, session = make_client(
            FakeResponse(body={"success": True, "data": {"id": "ct-1"}}),
            FakeResponse(body={"success": True, "data": {"id": "ct-1"}}),
        )
        client.create_contract({"rental_days": 5})
        client.update_contract("ct-1", {"rental_days": 6})

        assert session.requests[0]["method"] == "POST"
        assert session.requests[0]["url"].endswith("/api/contracts")
        assert session.requests[0]["json"] == {"rental_days": 5}
        assert session.requests[1]["method"] == "PUT"
        assert session.requests[1]["url"].endswith("/api/contracts/ct-1")

    def test_vehicle_endpoints(self):
        client, session = make_client(
            FakeResponse(body={"success": True, "data": {"id": "ve-1"}}),
            FakeResponse(body={"success": True, "data": {"id": "ve-1"}}),
            FakeResponse(body={"success": True, "data": {"models": []}}),
        )
        client.create_vehicle({})
        client.update_vehicle("ve-1", {})
        client.get_vehicle_models("mk-1")

        assert session.requests[0]["url"].endswith("/api/add-vehicle")
        assert session.requests[1]["url"].endswith("/api/vehicles/ve-1")
        assert session.requests[2]["params"] == {"make_id": "mk-1"}


class TestEnvelope:
    """Every endpoint answers {success, data, error}."""

    def test_envelope_passed_through(self):
        client, _ = make_client(FakeResponse(body={"success": True, "data": {"inspectors": [1]}}))
        assert client.get_inspectors() == {"success": True, "data": {"inspectors": [1]}, "error": None}

    def test_bare_body_wrapped(self):
        client, _ = make_client(FakeResponse(body=[{"id": "br-1"}]))
        envelope = client.get_branches()
        assert envelope["success"] is True
        assert envelope["data"] == [{"id": "br-1"}]

    def test_empty_body(self):
        client, _ = make_client(FakeResponse(body=None))
        assert client.get_vehicle_colors() == {"success": True, "data": None, "error": None}

    def test_unsuccessful_envelope(self):
        client, _ = make_client(FakeResponse(body={"success": False, "data": None,
                                                  "error": "Plate already registered"}))
        envelope = client.create_vehicle({})
        assert envelope["success"] is False
        assert envelope["error"] == "Plate already registered"

    def test_http_error_uses_server_message(self):
        client, _ = make_client(FakeResponse(409, {"success": False, "error": "Vehicle already rented"}))
        envelope = client.create_contract({})
        assert envelope["success"] is False
        assert envelope["error"] == "Vehicle already rented"
        assert envelope["status_code"] == 409

    def test_http_error_without_body(self):
        client, _ = make_client(FakeResponse(500, None))
        envelope = client.get_owners()
        assert envelope["success"] is False
        assert envelope["status_code"] == 500
        assert envelope["error"]

    def test_network_error(self):
        client, _ = make_client(requests.exceptions.ConnectionError("refused"))
        envelope = client.search_vehicles("ABC")
        assert envelope["success"] is False
        assert "refused" in envelope["error"]

    def test_timeout(self):
        client, _ = make_client(requests.exceptions.Timeout("timed out"))
        assert client.get_insurance_policies()["success"] is False


class TestSingleton:
    """get_api_client returns one shared instance."""

    def test_shared_instance(self):
        reset_api_client()
        try:
            first = get_api_client(ApiConfig(base_url="http://a", token="", timeout=1, verify_ssl=True))
            assert get_api_client() is first
            assert first.base_url == "http://a"
        finally:
            reset_api_client()
