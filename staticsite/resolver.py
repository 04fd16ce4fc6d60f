"""
Configuration resolution: caller settings + environment -> ResolvedConfig.

Every non-DNS setting falls back to a fixed default, so a ResolvedConfig is
always complete. DNS is the only optional feature. When the caller passes an
explicit Route 53 configuration it is used as given (only ``subdomain`` is
defaulted). When the caller omits it, the environment is consulted:

- ``ROUTE53_DOMAIN_NAME`` (default ``DEFAULT_DOMAIN_NAME``)
- ``ROUTE53_HOSTED_ZONE_ID``, then ``HOSTED_ZONE_ID``
- ``ROUTE53_SUBDOMAIN`` (default ``DEFAULT_SUBDOMAIN``)

If none of these variables is set, DNS is disabled. If any is set but no
hosted zone id can be found, resolution fails with MissingHostedZone.

The environment is always passed in explicitly; nothing here reads
``os.environ``.
"""

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BUCKET_NAME = "s3website.example.com"
DEFAULT_WEBSITE_INDEX_DOCUMENT = "index.html"
DEFAULT_WEBSITE_DIRECTORY = "./website"
DEFAULT_EXPORT_NAME = "StaticWebsiteWithS3Url"
DEFAULT_DOMAIN_NAME = "example.com"
DEFAULT_SUBDOMAIN = "s3website"

ENV_DOMAIN_NAME = "ROUTE53_DOMAIN_NAME"
ENV_SUBDOMAIN = "ROUTE53_SUBDOMAIN"
# Checked in order; the first non-empty value wins.
ENV_HOSTED_ZONE_IDS: tuple[str, ...] = ("ROUTE53_HOSTED_ZONE_ID", "HOSTED_ZONE_ID")

_DNS_ENV_KEYS: tuple[str, ...] = (ENV_DOMAIN_NAME, ENV_SUBDOMAIN, *ENV_HOSTED_ZONE_IDS)


class ConfigError(Exception):
    """Invalid or incomplete website configuration."""


class MissingHostedZone(ConfigError):
    """DNS was requested but no hosted zone id is available."""

    def __init__(self, source: str):
        super().__init__(f"Route 53 hosted zone id is required ({source})")
        self.source = source


class MissingDomainName(ConfigError):
    """An explicit Route 53 configuration has no domain name."""

    def __init__(self):
        super().__init__("route53 domain_name is required when route53 is set")


@dataclass(frozen=True)
class DnsConfig:
    """
    Route 53 settings for the custom-domain alias.

    Attributes:
        domain_name: Apex domain (e.g. "example.com").
        hosted_zone_id: Route 53 hosted zone id (e.g. "Z123").
        subdomain: Leading label (e.g. "www"); None or "" means the zone apex.
    """

    domain_name: str
    hosted_zone_id: str
    subdomain: str | None = None


@dataclass(frozen=True)
class PartialDnsConfig:
    """Route 53 settings as supplied by the caller; any field may be missing."""

    domain_name: str | None = None
    hosted_zone_id: str | None = None
    subdomain: str | None = None


@dataclass(frozen=True)
class PartialConfig:
    """Caller-supplied settings; None or "" means "use the default"."""

    bucket_name: str | None = None
    website_index_document: str | None = None
    website_directory: str | None = None
    export_name: str | None = None
    route53_config: PartialDnsConfig | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Fully resolved website settings.

    Every attribute except ``dns_config`` is a non-empty string.
    """

    bucket_name: str
    website_index_document: str
    website_directory: str
    export_name: str
    dns_config: DnsConfig | None = None


def _or_default(value: str | None, default: str) -> str:
    return value if value else default


def _first_set(environ: Mapping[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = environ.get(key)
        if value:
            return value
    return None


def _explicit_dns(raw: PartialDnsConfig) -> DnsConfig:
    if not raw.hosted_zone_id:
        raise MissingHostedZone("route53.hosted_zone_id is not set")
    if not raw.domain_name:
        raise MissingDomainName()
    subdomain = DEFAULT_SUBDOMAIN if raw.subdomain is None else raw.subdomain
    return DnsConfig(
        domain_name=raw.domain_name,
        hosted_zone_id=raw.hosted_zone_id,
        subdomain=subdomain,
    )


def _environment_dns(environ: Mapping[str, str]) -> DnsConfig | None:
    if not any(environ.get(key) for key in _DNS_ENV_KEYS):
        return None
    hosted_zone_id = _first_set(environ, ENV_HOSTED_ZONE_IDS)
    if hosted_zone_id is None:
        raise MissingHostedZone(
            f"none of {', '.join(ENV_HOSTED_ZONE_IDS)} is set in the environment"
        )
    return DnsConfig(
        domain_name=_or_default(environ.get(ENV_DOMAIN_NAME), DEFAULT_DOMAIN_NAME),
        hosted_zone_id=hosted_zone_id,
        subdomain=_or_default(environ.get(ENV_SUBDOMAIN), DEFAULT_SUBDOMAIN),
    )


def resolve(
    raw: PartialConfig,
    environ: Mapping[str, str],
) -> ResolvedConfig:
    """
    Merge caller settings with defaults and environment-derived DNS settings.

    Args:
        raw: Caller-supplied settings.
        environ: Environment variables; only read when ``raw.route53_config``
            is None.

    Returns:
        ResolvedConfig with every non-DNS field set.

    Raises:
        MissingHostedZone: DNS is requested (explicitly or via the
            environment) but no hosted zone id is available.
        MissingDomainName: ``raw.route53_config`` has no domain name.
    """
    if raw.route53_config is not None:
        dns_config = _explicit_dns(raw.route53_config)
    else:
        dns_config = _environment_dns(environ)

    return ResolvedConfig(
        bucket_name=_or_default(raw.bucket_name, DEFAULT_BUCKET_NAME),
        website_index_document=_or_default(
            raw.website_index_document, DEFAULT_WEBSITE_INDEX_DOCUMENT
        ),
        website_directory=_or_default(raw.website_directory, DEFAULT_WEBSITE_DIRECTORY),
        export_name=_or_default(raw.export_name, DEFAULT_EXPORT_NAME),
        dns_config=dns_config,
    )
