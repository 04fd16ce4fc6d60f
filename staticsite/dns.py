"""
Route 53 alias for a custom domain pointing at the bucket website endpoint.

The hosted zone is referenced by id and name only; no lookup is made, so a
mismatched id/name pair is reported by Route 53 when Pulumi applies the
record. The alias targets the bucket's *website* endpoint, the only S3
endpoint that can be an alias target for website hosting.
"""

from staticsite.graph import ALIAS_RECORD_ID, AliasRecordResource, EndpointRef
from staticsite.resolver import DnsConfig, MissingHostedZone


def build_zone_name(
    dns_config: DnsConfig,
) -> str:
    """
    Build the zone name like 'www.example.com' from domain and subdomain.

    Returns the bare domain when subdomain is None or empty.
    """
    if dns_config.subdomain:
        return f"{dns_config.subdomain}.{dns_config.domain_name}"
    return dns_config.domain_name


def build_alias(
    dns_config: DnsConfig,
    bucket_endpoint: EndpointRef,
) -> AliasRecordResource:
    """
    Build the A (alias) record node for the website.

    Args:
        dns_config: Resolved Route 53 settings.
        bucket_endpoint: Website endpoint attribute of the bucket node.

    Raises:
        MissingHostedZone: ``dns_config.hosted_zone_id`` is empty. Resolution
            already rejects this, so reaching it is a bug.
    """
    if not dns_config.hosted_zone_id:
        raise MissingHostedZone("hosted_zone_id is empty")

    zone_name = build_zone_name(dns_config)
    return AliasRecordResource(
        node_id=ALIAS_RECORD_ID,
        depends_on=(bucket_endpoint.node_id,),
        zone_name=zone_name,
        hosted_zone_id=dns_config.hosted_zone_id,
        record_name=zone_name,
        record_type="A",
        target=bucket_endpoint,
    )
