"""
S3 static website - Pulumi entrypoint.

Resolves stack config and environment into a ResolvedConfig, assembles the
resource graph and provisions it with the StaticWebsite component:

- **Bucket**: S3 website bucket, public read through a bucket policy, emptied
  automatically on destroy.
- **Deployment**: contents of ``website_directory`` (relative to this
  project, not the current directory) synced into the bucket.
- **DNS** (optional): Route 53 A alias to the bucket website endpoint. Set
  ``route53`` in stack config, or ROUTE53_HOSTED_ZONE_ID / HOSTED_ZONE_ID
  (plus ROUTE53_DOMAIN_NAME, ROUTE53_SUBDOMAIN) in the environment or .env.

Stack exports: the website URL, under ``export_name``.
"""

import os

import pulumi
from dotenv import load_dotenv

from config import StackConfig
from staticsite import ConfigError, assemble, resolve
from staticsite.assembler import PROJECT_ROOT
from staticsite.aws import StaticWebsite

COMPONENT_NAME = "static-website"


def main():
    """
    Build the static website and export its URL.

    Configuration errors are logged and re-raised before any resource is
    declared.
    """
    # Variables already set in the environment take precedence over .env.
    load_dotenv(PROJECT_ROOT / ".env")

    try:
        config = resolve(
            StackConfig.from_pulumi_config(pulumi.Config()).to_partial(),
            dict(os.environ),
        )
    except ConfigError as e:
        pulumi.log.error(f"Invalid website configuration: {e}")
        raise

    if config.dns_config is None:
        pulumi.log.info("Route 53 alias disabled: no DNS configuration found")
    else:
        pulumi.log.info(
            f"Route 53 alias enabled for hosted zone {config.dns_config.hosted_zone_id}"
        )

    site = StaticWebsite(COMPONENT_NAME, assemble(config))

    for output_name, value in site.exports.items():
        pulumi.export(output_name, value)


if __name__ == "__main__":
    main()
