"""OAuth2 client-credentials flow for the Battle.net API.

Two operations, each a single HTTP round trip:

* :func:`acquire_token` exchanges client credentials for an access token.
* :func:`validate_token` introspects an access token.

Nothing is cached or retried. Every call opens its own ``httpx.AsyncClient``
and closes it before returning, so calls can run concurrently.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from battlenet_oauth.models.auth import OAuthToken, ValidatedToken
from battlenet_oauth.regions import check_token_url, token_url
from battlenet_oauth.utils.errors import DecodeError, MalformedInputError, TransportError

logger = logging.getLogger(__name__)

GRANT_TYPE = "client_credentials"

_Model = TypeVar("_Model", bound=BaseModel)


class _StripQueryFilter(logging.Filter):
    """Drop query strings from URLs in httpx's own request log."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple):
            record.args = tuple(
                str(arg).partition("?")[0] if isinstance(arg, httpx.URL) else arg
                for arg in record.args
            )
        return True


logging.getLogger("httpx").addFilter(_StripQueryFilter())


class CredentialStrategy(str, Enum):
    """How client credentials are sent to the token endpoint."""
    QUERY = "query"
    BASIC = "basic"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build the ``Authorization`` header value for the Basic-Auth strategy."""
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


async def acquire_token(
    client_id: str,
    client_secret: str,
    region: str,
    strategy: CredentialStrategy = CredentialStrategy.QUERY,
    *,
    hosts: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OAuthToken:
    """Request an access token with the client-credentials grant.

    Args:
        client_id: OAuth client ID.
        client_secret: OAuth client secret.
        region: Region code (us, eu, kr, tw, cn). Case-insensitive.
        strategy: Send credentials as query parameters or as a Basic-Auth header.
        hosts: Extra region-to-host overrides, see :func:`battlenet_oauth.regions.resolve_host`.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        The decoded token.

    Raises:
        MalformedInputError: If a credential or the region is empty.
        TransportError: If the request could not be completed.
        DecodeError: If the response body is not a token payload.
    """
    _require(client_id=client_id, client_secret=client_secret)
    url = token_url(region, hosts)

    if strategy is CredentialStrategy.BASIC:
        request_kwargs = {
            "headers": {"Authorization": basic_auth_header(client_id, client_secret)},
            "data": {"grant_type": GRANT_TYPE},
        }
    else:
        request_kwargs = {
            "params": {
                "grant_type": GRANT_TYPE,
                "client_id": client_id,
                "client_secret": client_secret,
            },
        }

    response = await _send("POST", url, transport, **request_kwargs)
    return _decode(response, OAuthToken)


async def validate_token(
    access_token: str,
    region: str,
    *,
    hosts: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ValidatedToken:
    """Introspect an access token at the region's ``check_token`` endpoint.

    Raises the same errors as :func:`acquire_token`.
    """
    _require(access_token=access_token)
    url = check_token_url(region, hosts)

    response = await _send("GET", url, transport, params={"token": access_token})
    return _decode(response, ValidatedToken)


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise MalformedInputError(f"{name} must not be empty")


async def _send(
    method: str,
    url: str,
    transport: httpx.AsyncBaseTransport | None,
    **kwargs,
) -> httpx.Response:
    """Issue exactly one request and return the response, whatever its status."""
    # Bare URL only: query strings may carry the client secret
    logger.info(f"{method} {url}")
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.request(method, url, **kwargs)
    except httpx.InvalidURL as e:
        raise MalformedInputError(f"Cannot build a request URL from {url!r}: {e}") from e
    except httpx.RequestError as e:
        raise TransportError(f"Request to {url} failed: {e}") from e

    logger.info(f"Response: {response.status_code}")
    return response


def _decode(response: httpx.Response, model: type[_Model]) -> _Model:
    """Decode the body into ``model`` without looking at the status code first."""
    if not response.is_success:
        logger.warning(f"{response.request.url.path} returned HTTP {response.status_code}")

    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"Could not decode {model.__name__} from HTTP {response.status_code} response: "
            f"{response.text[:200]}",
            status_code=response.status_code,
        ) from e
