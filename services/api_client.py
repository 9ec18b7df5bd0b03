# -*- coding: utf-8 -*-
"""
FleetDesk API Client - REST access to the rental back-office backend.
=====================================================================

Every endpoint method returns the backend's uniform envelope
``{"success": bool, "data": ..., "error": str | None}``. HTTP and network
failures are folded into a failed envelope by ``_envelope()``; callers that
need the exception (submission) use the ``*_or_raise`` helpers.
"""

import json
import requests
import urllib3
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from utils.logger import get_logger
from services.exceptions import ApiException, NetworkException

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Reads from .env via Config when values are not provided.

    Example .env:
        API_BASE_URL=http://192.168.100.221:3000
        API_TOKEN=<bearer token issued by the auth service>
    """
    base_url: str = None
    token: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class RentalApiClient:
    """
    Client for the rental backend.

    Usage:
        client = RentalApiClient(ApiConfig(base_url="http://localhost:3000"))
        result = client.search_vehicles("ABC")
        if result["success"]:
            vehicles = result["data"]["vehicles"]
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.access_token: Optional[str] = config.token or None
        self.session = session or requests.Session()
        if not config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def set_access_token(self, token: str):
        """Set the bearer token issued by the (external) auth layer."""
        self.access_token = token
        logger.debug("Access token updated externally")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/api/contracts")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Response JSON data

        Raises:
            ApiException: HTTP error status
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.info(f"[API REQ] Body: {json.dumps(json_data, indent=2, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result:
                res_str = json.dumps(result, indent=2, ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                response_data = {}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {}
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    def _envelope(self, call: Callable[[], Any]) -> Dict[str, Any]:
        """
        Normalise a call into ``{success, data, error}``.

        Bodies that already carry ``success`` are passed through; anything
        else is wrapped as ``data``.
        """
        try:
            body = call()
        except ApiException as e:
            error = e.server_error or e.message
            return {"success": False, "data": None, "error": error, "status_code": e.status_code}
        except NetworkException as e:
            return {"success": False, "data": None, "error": e.message}

        if isinstance(body, dict) and "success" in body:
            return {
                "success": bool(body.get("success")),
                "data": body.get("data"),
                "error": body.get("error"),
            }
        if isinstance(body, dict) and body.get("error"):
            return {"success": False, "data": None, "error": body.get("error")}
        return {"success": True, "data": body, "error": None}

    def _get(self, endpoint: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        return self._envelope(lambda: self._request("GET", endpoint, params=params))

    # ==================== Entity search ====================

    def search_customers(self, query: str, limit: int = 20) -> Dict[str, Any]:
        """GET /api/customers?search=...  -> data.customers"""
        return self._get("/api/customers", {"search": query, "limit": limit})

    def get_customer_statuses(self, limit: int = 100) -> Dict[str, Any]:
        """GET /api/customer-configuration/statuses -> data.statuses"""
        return self._get("/api/customer-configuration/statuses", {"limit": limit})

    def search_vehicles(self, query: str, limit: int = 50) -> Dict[str, Any]:
        """GET /api/vehicles?search=... -> data.vehicles"""
        return self._get("/api/vehicles", {"search": query, "limit": limit, "page": 1})

    def get_inspectors(self) -> Dict[str, Any]:
        """GET /api/inspectors -> data.inspectors"""
        return self._get("/api/inspectors")

    # ==================== Vehicle configuration ====================

    def get_vehicle_makes(self) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/makes")

    def get_vehicle_models(self, make_id: str) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/models", {"make_id": make_id})

    def get_vehicle_colors(self) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/colors")

    def get_vehicle_statuses(self, limit: int = 100) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/statuses", {"page": 1, "limit": limit})

    def get_owners(self, limit: int = 100) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/owners", {"page": 1, "limit": limit})

    def get_actual_users(self, limit: int = 100) -> Dict[str, Any]:
        return self._get("/api/vehicle-configuration/actual-users", {"page": 1, "limit": limit})

    def get_insurance_policies(self) -> Dict[str, Any]:
        return self._get("/api/insurance-policies")

    def get_branches(self) -> Dict[str, Any]:
        return self._get("/api/branches")

    # ==================== Create / update ====================

    def create_contract(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._envelope(lambda: self._request("POST", "/api/contracts", json_data=payload))

    def update_contract(self, contract_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._envelope(
            lambda: self._request("PUT", f"/api/contracts/{contract_id}", json_data=payload)
        )

    def create_vehicle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._envelope(lambda: self._request("POST", "/api/add-vehicle", json_data=payload))

    def update_vehicle(self, vehicle_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._envelope(
            lambda: self._request("PUT", f"/api/vehicles/{vehicle_id}", json_data=payload)
        )


# ==================== Singleton ====================

_api_client_instance: Optional[RentalApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> RentalApiClient:
    """
    Return the shared RentalApiClient (Singleton).

    Args:
        config: API configuration (used only on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = RentalApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Reset the shared client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
