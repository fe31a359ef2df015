"""
Backend API Client

HTTP client for the shop's REST backend (auth, catalog, orders).
Responses use the envelope {"status": "success"|"fail"|"error", "message", "data"}.
"""

import json
import logging
from typing import Optional, Any

import httpx

logger = logging.getLogger(__name__)


class StorefrontClientError(Exception):
    """Base exception for backend client errors"""
    pass


class BackendError(StorefrontClientError):
    """Backend rejected the request or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BackendClient:
    """
    Client for the shop backend.

    Holds one connection pool for the whole service; per-user bearer
    tokens are passed on each call.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        service_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize backend client.

        Args:
            base_url: Base URL of the backend API, e.g. http://localhost:5000/api
            timeout: Request timeout in seconds
            service_token: Bearer token used when no user token is given
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.service_token = service_token
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _generate_headers(self, token: Optional[str] = None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        bearer = token or self.service_token
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Make an HTTP request and unwrap the response envelope"""
        url = f"{self.base_url}{path}"
        body_str = json.dumps(body) if body is not None else None

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=self._generate_headers(token),
                params=params,
                content=body_str,
            )
        except httpx.HTTPError as e:
            logger.error(f"Request {method} {path} failed: {e}")
            raise BackendError(f"Không thể kết nối máy chủ: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            message = payload.get("message") if isinstance(payload, dict) else None
            raise BackendError(
                message or f"Lỗi máy chủ: {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(payload, dict) or payload.get("status") != "success":
            message = payload.get("message") if isinstance(payload, dict) else None
            raise BackendError(message or "Yêu cầu không thành công", status_code=response.status_code)

        return payload

    # ==================== Auth APIs ====================

    async def login(self, email: str, password: str) -> tuple[Optional[str], dict]:
        """
        Log in with email and password.

        Returns:
            Tuple of (bearer token, backend user record)
        """
        payload = await self._request(
            "POST",
            "/auth/login",
            body={"email": email, "password": password},
        )
        data = payload.get("data") or {}
        if not data.get("user"):
            raise BackendError(payload.get("message") or "Đăng nhập thất bại")
        return data.get("token"), data["user"]

    async def logout(self, token: Optional[str]) -> None:
        """Log out the current user"""
        await self._request("POST", "/auth/logout", token=token)

    async def get_profile(self, token: str) -> dict:
        """Get the current user's profile"""
        payload = await self._request("GET", "/auth/profile", token=token)
        return payload.get("data") or {}

    # ==================== Catalog APIs ====================

    async def get_product(self, product_id: str) -> dict:
        """Get product details"""
        payload = await self._request("GET", f"/san-pham/{product_id}")
        return payload.get("data") or {}

    # ==================== Order APIs ====================

    async def create_order(self, order_data: dict, token: Optional[str] = None) -> dict:
        """Create an order from the checkout form"""
        payload = await self._request("POST", "/don-hang", body=order_data, token=token)
        return payload.get("data") or {}

    async def get_orders(
        self,
        page: int = 1,
        status: Optional[str] = None,
        token: Optional[str] = None,
    ) -> dict:
        """
        List orders, one page at a time.

        Returns:
            {"donhangs": [...], "pagination": {"totalPages": n, ...}}
        """
        params: dict[str, Any] = {"page": page}
        if status:
            params["trangThai"] = status
        payload = await self._request("GET", "/don-hang", params=params, token=token)
        return payload.get("data") or {}

    async def update_order_status(
        self,
        order_id: int,
        status: str,
        admin_note: Optional[str] = None,
        token: Optional[str] = None,
    ) -> dict:
        """Update an order's status"""
        body: dict[str, Any] = {"status": status}
        if admin_note:
            body["adminNote"] = admin_note
        payload = await self._request("PATCH", f"/don-hang/{order_id}", body=body, token=token)
        return payload.get("data") or {}

    async def get_order(self, order_id: int, token: Optional[str] = None) -> dict:
        """Get one order with its product lines"""
        payload = await self._request("GET", f"/don-hang/{order_id}", token=token)
        return payload.get("data") or {}
