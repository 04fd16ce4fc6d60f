"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of stack settings. All settings are read from
Pulumi config (e.g. Pulumi.<stack>.yaml or pulumi config set). Every key is
optional; missing keys are filled in by staticsite.resolve. Used by
__main__.main() to name the bucket, locate the site assets, name the stack
export and, through the structured ``route53`` key, set up the DNS alias:

    pulumi config set --path route53.domain_name example.com
    pulumi config set --path route53.hosted_zone_id Z123
    pulumi config set --path route53.subdomain www
"""

from dataclasses import dataclass
from typing import Any, Callable

import pulumi

from staticsite import ConfigError, PartialConfig, PartialDnsConfig

_ROUTE53_KEYS = ("domain_name", "hosted_zone_id", "subdomain")


def _get_str(config: pulumi.Config, key: str) -> str | None:
    return config.get(key)


def _get_route53(config: pulumi.Config, key: str) -> PartialDnsConfig | None:
    raw = config.get_object(key)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigError(f"'{key}' must be an object, got {type(raw).__name__}")
    unknown = set(raw) - set(_ROUTE53_KEYS)
    if unknown:
        raise ConfigError(f"Unknown '{key}' keys: {', '.join(sorted(unknown))}")
    # Keep "" for subdomain: it selects the zone apex instead of the default.
    values = {name: None if raw.get(name) is None else str(raw[name]) for name in _ROUTE53_KEYS}
    return PartialDnsConfig(**values)


# (key, parser); parser receives (config, key) and returns value.
_CONFIG_SPEC: list[tuple[str, Callable[[pulumi.Config, str], Any]]] = [
    ("bucket_name", _get_str),
    ("website_index_document", _get_str),
    ("website_directory", _get_str),
    ("export_name", _get_str),
    ("route53", _get_route53),
]


@dataclass(frozen=True)
class StackConfig:
    """
    Stack configuration from Pulumi config.

    Attributes:
        bucket_name: S3 bucket name (must be globally unique).
        website_index_document: Index document served by the website.
        website_directory: Local asset directory, relative to the project root.
        export_name: Name of the stack output holding the website URL.
        route53: Custom-domain settings; None to fall back to the environment.
    """

    bucket_name: str | None = None
    website_index_document: str | None = None
    website_directory: str | None = None
    export_name: str | None = None
    route53: PartialDnsConfig | None = None

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config) -> "StackConfig":
        """
        Build StackConfig from pulumi.Config(). Keys in _CONFIG_SPEC are optional.
        """
        kwargs = {key: parser(config, key) for key, parser in _CONFIG_SPEC}
        return cls(**kwargs)

    def to_partial(self) -> PartialConfig:
        return PartialConfig(
            bucket_name=self.bucket_name,
            website_index_document=self.website_index_document,
            website_directory=self.website_directory,
            export_name=self.export_name,
            route53_config=self.route53,
        )
