"""Region code to Battle.net OAuth endpoint mapping."""

from __future__ import annotations

from collections.abc import Mapping

from battlenet_oauth.utils.errors import MalformedInputError

PROVIDER_DOMAIN = "battle.net"

# Regions served from a fixed host instead of {region}.battle.net
REGION_HOSTS: dict[str, str] = {
    "cn": "www.battlenet.com.cn",
}

KNOWN_REGIONS = ("us", "eu", "kr", "tw", "cn")

# Characters that would move the region out of the host part of the URL
_URL_DELIMITERS = frozenset("/?#@\\")

TOKEN_PATH = "/oauth/token"
CHECK_TOKEN_PATH = "/oauth/check_token"


def resolve_host(region: str, hosts: Mapping[str, str] | None = None) -> str:
    """Get the OAuth host for a region code (case-insensitive).

    Args:
        region: Region code such as ``us``, ``EU`` or ``cn``.
        hosts: Extra region-to-host entries. These take precedence over
            :data:`REGION_HOSTS`; keys are matched lower-cased.

    Returns:
        The hostname. Unrecognised codes are interpolated into
        ``{region}.battle.net``; only URL delimiters are rejected.
    """
    if not region:
        raise MalformedInputError("region must not be empty")

    code = region.lower()
    if _URL_DELIMITERS.intersection(code):
        raise MalformedInputError(f"region {region!r} is not a host label")

    lookup = dict(REGION_HOSTS)
    if hosts:
        lookup.update({key.lower(): value for key, value in hosts.items()})

    return lookup.get(code, f"{code}.{PROVIDER_DOMAIN}")


def token_url(region: str, hosts: Mapping[str, str] | None = None) -> str:
    return f"https://{resolve_host(region, hosts)}{TOKEN_PATH}"


def check_token_url(region: str, hosts: Mapping[str, str] | None = None) -> str:
    return f"https://{resolve_host(region, hosts)}{CHECK_TOKEN_PATH}"
