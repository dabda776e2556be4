"""
SpaceTraders API client for making HTTP requests to the SpaceTraders API.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

import requests
from dotenv import load_dotenv

from api.errors import (
    BadRequestError,
    DecodeError,
    InvalidInputError,
    MissingTokenError,
    NetworkError,
    TokenPersistError,
)
from models import AgentData, ApiResponse, EnvelopeError, Factions, LocationData, RegistrationData
from models.base import ApiModel
from utils.config import DEFAULT_CONFIG_PATH, ConfigData, ConfigError, write_config_file, read_config_file

logger = logging.getLogger(__name__)

BASE_URL = "https://api.spacetraders.io/v2"
DEFAULT_TIMEOUT = 30.0
AGENT_TOKEN_ENV = "AGENT_TOKEN"

# Dash-separated alphanumeric segments, at least two of them.
WAYPOINT_PATTERN = re.compile(r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)+")

T = TypeVar('T', bound=ApiModel)


def system_symbol_from_waypoint(waypoint: str) -> str:
    """
    Extract the system symbol from a waypoint symbol.

    Waypoints look like ``SECTOR-SYSTEM-WAYPOINT``; the system is the first
    two segments (e.g. 'X1-DF55-20250Z' -> 'X1-DF55'). Anything after the
    second segment is ignored.

    Raises:
        InvalidInputError: If the waypoint has fewer than two segments or any
            character other than letters, digits and dashes
    """
    if not isinstance(waypoint, str):
        raise InvalidInputError(f"Waypoint must be a string, got {type(waypoint).__name__}")
    if not WAYPOINT_PATTERN.fullmatch(waypoint):
        raise InvalidInputError(
            f"Invalid waypoint {waypoint!r}: expected SECTOR-SYSTEM-WAYPOINT, e.g. 'X1-DF55-20250Z'"
        )
    return '-'.join(waypoint.split('-')[:2])


class ApiClient:
    """
    Client for interacting with the SpaceTraders API.

    Holds a reusable HTTP session and the agent's bearer token. Build one
    with ``from_config``, ``from_bootstrap_token`` or ``from_registration``;
    the token does not change after construction.
    """

    def __init__(
            self,
            token: str = "",
            *,
            base_url: str = BASE_URL,
            timeout: float = DEFAULT_TIMEOUT,
            session: Optional[requests.Session] = None,
            config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
            account_token: Optional[str] = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            token: Agent authentication token
            base_url: Base URL for the SpaceTraders API
            timeout: Request timeout in seconds
            session: HTTP session to reuse; a new one is created if omitted
            config_path: Where the agent token is persisted after registration
            account_token: Optional account token sent when registering agents
        """
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.config_path = Path(config_path)
        self.account_token = account_token
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    # ---------- construction ----------

    @classmethod
    def from_config(cls, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH, **kwargs: Any) -> 'ApiClient':
        """
        Build a client from the token saved in the config file.

        Raises:
            MissingTokenError: If there is no usable config file
        """
        config = read_config_file(config_path)
        if config is None:
            raise MissingTokenError(f"no token found in config file {config_path}")
        logger.info("Loaded agent token from %s", config_path)
        return cls(config.token, config_path=config_path, **kwargs)

    @classmethod
    def from_bootstrap_token(
            cls,
            token_file: Optional[Union[str, Path]] = None,
            env_var: str = AGENT_TOKEN_ENV,
            **kwargs: Any,
    ) -> 'ApiClient':
        """
        Build a client from an out-of-band token.

        Reads the token from ``token_file`` when given, otherwise from the
        ``env_var`` environment variable (``.env`` files are honoured).
        Surrounding whitespace is stripped.

        Raises:
            MissingTokenError: If the token cannot be read or is empty
        """
        if token_file is not None:
            try:
                token = Path(token_file).read_text(encoding="utf-8").strip()
            except OSError as e:
                raise MissingTokenError(f"cannot read token file {token_file}") from e
            source = str(token_file)
        else:
            load_dotenv()
            token = (os.getenv(env_var) or "").strip()
            source = env_var

        if not token:
            raise MissingTokenError(f"no token in {source}")
        logger.info("Loaded agent token from %s", source)
        return cls(token, **kwargs)

    @classmethod
    def from_registration(cls, agent_name: str, faction: Union[Factions, str], **kwargs: Any) -> 'ApiClient':
        """
        Register a new agent and return a client authenticated as it.

        The new token is saved to the config file as part of registration.
        Raises whatever ``register_new_agent`` raises.
        """
        client = cls("", **kwargs)
        try:
            registration = client.register_new_agent(agent_name, faction)
        except Exception:
            client.close()
            raise
        client._token = registration.token
        return client

    @property
    def token(self) -> str:
        return self._token

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self.base_url!r}, token={'***' if self._token else ''!r})"

    # ---------- public API ----------

    def register_new_agent(self, agent_name: str, faction: Union[Factions, str]) -> RegistrationData:
        """
        Register a new agent and save its token to the config file.

        Args:
            agent_name: Desired callsign of the new agent
            faction: Faction to join, as a Factions member or case-insensitive name

        Returns:
            RegistrationData for the new agent

        Raises:
            InvalidInputError: If the name is empty or the faction is unknown
            BadRequestError: If the API rejects the registration (e.g. name taken)
            TokenPersistError: If registration succeeded but the token could not be saved
        """
        if not isinstance(agent_name, str) or not agent_name.strip():
            raise InvalidInputError("Agent name must be a non-empty string")
        try:
            faction = Factions.parse(faction)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        payload = {"symbol": agent_name, "faction": faction.value}
        registration = self._send_request(
            "POST", "/register", RegistrationData,
            token=self.account_token, json=payload, log_body=False,
        )

        try:
            write_config_file(ConfigData(token=registration.token), self.config_path)
        except ConfigError as e:
            raise TokenPersistError(registration, e) from e

        logger.info("Registered agent %s with faction %s", registration.agent.symbol, faction.value)
        return registration

    def get_agent_data(self) -> AgentData:
        """GET /my/agent"""
        return self._send_request("GET", "/my/agent", AgentData, token=self._token)

    def get_waypoint_location(self, waypoint: str) -> LocationData:
        """GET /systems/{system}/waypoints/{waypoint}"""
        system_symbol = system_symbol_from_waypoint(waypoint)
        path = f"/systems/{system_symbol}/waypoints/{waypoint}"
        return self._send_request("GET", path, LocationData, token=self._token)

    # ---------- internals ----------

    def _send_request(
            self,
            method: str,
            path: str,
            payload_type: Type[T],
            token: Optional[str] = None,
            log_body: bool = True,
            **kwargs: Any,
    ) -> T:
        url = f"{self.base_url}{path}"
        headers = kwargs.pop("headers", {})
        if token:
            headers["Authorization"] = f"Bearer {token}"
        headers.setdefault("Content-Type", "application/json")

        logger.info(">> %s %s", method, url)
        try:
            resp = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Request error for %s %s: %s", method, url, e)
            raise NetworkError(e) from e

        if log_body:
            logger.debug("<< Response %s: %s", resp.status_code, resp.text)
        else:
            logger.debug("<< Response %s", resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            logger.error("Response %s from %s is not JSON", resp.status_code, url)
            raise DecodeError(f"body is not valid JSON ({e})", resp.status_code, resp.text) from e

        try:
            envelope = ApiResponse.from_api_response(body, payload_type)
        except EnvelopeError as e:
            logger.error("Unexpected response shape from %s: %s", url, e)
            raise DecodeError(str(e), resp.status_code, body) from e

        if envelope.is_error:
            logger.error("Request failed [%s]: %s (code %s)", resp.status_code,
                         envelope.error.message, envelope.error.code)
            raise BadRequestError(envelope.error, resp.status_code)
        return envelope.data
