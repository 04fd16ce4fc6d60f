"""
Static website on S3 with an optional Route 53 alias.

Pure configuration and graph assembly live in their own modules so they can be
tested without a Pulumi stack; ``staticsite.aws`` turns the graph into Pulumi
resources:

- **resolve**: caller settings + environment -> ResolvedConfig (defaults for
  every non-DNS field, DNS optional).
- **assemble**: ResolvedConfig -> ResourceGraph (bucket, deployment, optional
  alias record, output).
- **StaticWebsite**: ComponentResource that provisions a ResourceGraph; import
  it from ``staticsite.aws``.
"""

from staticsite.assembler import assemble
from staticsite.dns import build_alias, build_zone_name
from staticsite.graph import ResourceGraph
from staticsite.resolver import (
    ConfigError,
    DnsConfig,
    MissingDomainName,
    MissingHostedZone,
    PartialConfig,
    PartialDnsConfig,
    ResolvedConfig,
    resolve,
)

__all__ = [
    "ConfigError",
    "DnsConfig",
    "MissingDomainName",
    "MissingHostedZone",
    "PartialConfig",
    "PartialDnsConfig",
    "ResolvedConfig",
    "ResourceGraph",
    "assemble",
    "build_alias",
    "build_zone_name",
    "resolve",
]
