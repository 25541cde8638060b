"""
Generic API repository for the remote restaurant platform API.
Maps symbolic endpoint names to URL templates, attaches bearer tokens and
retries once after a token refresh when the API answers 401.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from console.utils.endpoints import API_ENDPOINTS
from console.utils.exceptions import ApiError
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)

ACCESS_TOKEN_KEY = 'access_token'
REFRESH_TOKEN_KEY = 'refresh_token'

AUTH_FAILED_MESSAGE = "Authentication failed. Please login again."


@dataclass
class ApiResponse:
    """Result of a remote call: either data or an error message, always a status"""
    status: int
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Any:
        """Return data, or raise ApiError carrying the remote status"""
        if self.error is not None:
            raise ApiError(self.error, status=self.status)
        return self.data


class TokenStore:
    """In-memory token holder"""

    def __init__(self, access_token: Optional[str] = None, refresh_token: Optional[str] = None):
        self._tokens = {ACCESS_TOKEN_KEY: access_token, REFRESH_TOKEN_KEY: refresh_token}

    @property
    def access_token(self) -> Optional[str]:
        return self._tokens.get(ACCESS_TOKEN_KEY)

    @property
    def refresh_token(self) -> Optional[str]:
        return self._tokens.get(REFRESH_TOKEN_KEY)

    def set_tokens(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        self._tokens[ACCESS_TOKEN_KEY] = access_token
        # a refresh response may omit the refresh token; keep the old one then
        if refresh_token:
            self._tokens[REFRESH_TOKEN_KEY] = refresh_token

    def clear(self) -> None:
        self._tokens[ACCESS_TOKEN_KEY] = None
        self._tokens[REFRESH_TOKEN_KEY] = None


class SessionTokenStore(TokenStore):
    """Tokens kept in the Django session of the console user"""

    def __init__(self, session):
        self._tokens = session
        self._session = session

    def set_tokens(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        super().set_tokens(access_token, refresh_token)
        self._session.modified = True

    def clear(self) -> None:
        self._session.pop(ACCESS_TOKEN_KEY, None)
        self._session.pop(REFRESH_TOKEN_KEY, None)
        self._session.modified = True


class ApiRepository:
    """
    Single HTTP client for every remote call made by the console.

    call() never raises for HTTP or network failures; it returns an ApiResponse
    with error and status set. Use ApiResponse.raise_for_error() where the
    caller wants an exception.
    """

    def __init__(
        self,
        base_url: str,
        endpoints: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        token_store: Optional[TokenStore] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.endpoints = dict(endpoints if endpoints is not None else API_ENDPOINTS)
        self.headers = {'Accept': '*/*', **(headers or {})}
        self.tokens = token_store if token_store is not None else TokenStore()
        self.timeout = timeout
        self.session = session or requests.Session()

    def call(
        self,
        endpoint_key: str,
        method: str = 'GET',
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        requires_auth: bool = True,
        path_params: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """
        Perform a request against a named endpoint.

        Args:
            endpoint_key: key in the endpoint table
            method: HTTP verb
            data: JSON body (or form fields when files are given)
            headers: extra headers for this call only
            requires_auth: attach the bearer token and allow refresh-and-retry
            path_params: values for {name} placeholders in the URL template
            query: query string parameters
            files: multipart files, switches the body to multipart/form-data
        """
        endpoint = self.endpoints.get(endpoint_key)
        if not endpoint:
            logger.warning(f"Unknown endpoint key '{endpoint_key}'")
            return ApiResponse(status=404, error=f"Endpoint '{endpoint_key}' not found in configuration")

        for key, value in (path_params or {}).items():
            endpoint = endpoint.replace('{' + key + '}', str(value))
        url = f"{self.base_url}{endpoint}"

        request_headers = {**self.headers, **(headers or {})}
        kwargs = {'params': query or None, 'timeout': self.timeout}
        method = method.upper()
        if data is not None and method in ('POST', 'PUT', 'PATCH'):
            if files:
                kwargs['data'] = data
            else:
                kwargs['json'] = data
        if files:
            kwargs['files'] = files

        if requires_auth and self.tokens.access_token:
            request_headers['Authorization'] = f"Bearer {self.tokens.access_token}"

        try:
            response = self.session.request(method, url, headers=request_headers, **kwargs)

            if response.status_code == 401 and requires_auth and self.tokens.refresh_token:
                logger.info(f"Token expired calling '{endpoint_key}', attempting to refresh")
                if self.refresh_access_token():
                    request_headers['Authorization'] = f"Bearer {self.tokens.access_token}"
                    response = self.session.request(method, url, headers=request_headers, **kwargs)
                else:
                    self._handle_authentication_failure()
                    return ApiResponse(status=401, error=AUTH_FAILED_MESSAGE)
        except requests.RequestException as e:
            logger.error(f"Network error calling '{endpoint_key}': {str(e)}")
            return ApiResponse(status=0, error=str(e) or "Network error occurred")

        if response.ok:
            if response.status_code == 204:
                return ApiResponse(status=response.status_code)
            try:
                return ApiResponse(status=response.status_code, data=response.json())
            except ValueError:
                return ApiResponse(status=response.status_code)

        error_message = self._extract_error(response)
        if response.status_code == 400:
            logger.warning(f"Bad request on '{endpoint_key}': {error_message}")
        elif response.status_code == 401:
            logger.warning(f"Unauthorized on '{endpoint_key}': {error_message}")
            self._handle_authentication_failure()
        elif response.status_code == 403:
            logger.warning(f"Forbidden on '{endpoint_key}': {error_message}")
        elif response.status_code == 404:
            logger.warning(f"Not found on '{endpoint_key}': {error_message}")
        elif response.status_code == 422:
            logger.warning(f"Validation error on '{endpoint_key}': {error_message}")
        else:
            logger.error(f"API error {response.status_code} on '{endpoint_key}': {error_message}")

        return ApiResponse(status=response.status_code, error=error_message)

    def _extract_error(self, response: requests.Response) -> str:
        error_message = f"Request failed with status {response.status_code}"
        text = response.text
        if not text:
            return error_message
        try:
            parsed = response.json()
        except ValueError:
            return text

        if not isinstance(parsed, dict):
            return text

        errors = parsed.get('errors')
        if response.status_code == 422 and isinstance(errors, dict) and errors.get('Validation Error'):
            validation_errors = errors['Validation Error']
            if isinstance(validation_errors, list):
                return '. '.join(str(e) for e in validation_errors)
            return str(validation_errors)

        return parsed.get('message') or parsed.get('error') or parsed.get('title') or text

    def refresh_access_token(self) -> bool:
        if not self.tokens.refresh_token:
            return False

        url = f"{self.base_url}{self.endpoints['refresh_token']}"
        try:
            response = self.session.request(
                'POST',
                url,
                headers=self.headers,
                json={'refreshToken': self.tokens.refresh_token},
                timeout=self.timeout,
            )
            if response.ok:
                payload = response.json()
                access_token = payload.get('accessToken') or payload.get('token')
                if not access_token:
                    logger.warning("Token refresh response carried no access token")
                    self.tokens.clear()
                    return False
                self.tokens.set_tokens(access_token, payload.get('refreshToken'))
                logger.info("Token refresh successful")
                return True
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Token refresh failed: {str(e)}")
        self.tokens.clear()
        return False

    def _handle_authentication_failure(self) -> None:
        self.tokens.clear()
        logger.warning("Authentication failed. Tokens cleared.")

    def update_endpoint(self, key: str, endpoint: str) -> None:
        self.endpoints[key] = endpoint

    def set_tokens(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        self.tokens.set_tokens(access_token, refresh_token)

    def logout(self) -> None:
        self.tokens.clear()

    def is_authenticated(self) -> bool:
        return bool(self.tokens.access_token)


def get_api_repository(request) -> ApiRepository:
    """Repository bound to the tokens of the current console session"""
    return ApiRepository(
        base_url=settings.CONSOLE_API_BASE_URL,
        token_store=SessionTokenStore(request.session),
        timeout=settings.CONSOLE_API_TIMEOUT,
    )
