"""
Assemble the ResourceGraph for a ResolvedConfig.

Order: bucket -> deployment -> optional alias record -> output. The result
depends only on the config and ``base_dir``, so assembling twice yields the
same node ids and edges.
"""

from pathlib import Path

from staticsite._helpers import resolve_asset_path
from staticsite.dns import build_alias
from staticsite.graph import (
    BUCKET_ID,
    DEPLOYMENT_ID,
    OUTPUT_ID,
    BucketResource,
    DeploymentResource,
    EndpointRef,
    OutputResource,
    ResourceGraph,
)
from staticsite.resolver import ResolvedConfig

# Relative asset directories are anchored here, not at the process cwd.
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


def assemble(
    config: ResolvedConfig,
    base_dir: Path = PROJECT_ROOT,
) -> ResourceGraph:
    """
    Build the website resource graph.

    Args:
        config: Output of ``resolve``.
        base_dir: Directory that ``config.website_directory`` is relative to.

    Returns:
        Graph with 3 nodes, or 4 when ``config.dns_config`` is set.
    """
    graph = ResourceGraph()

    bucket = graph.add(
        BucketResource(
            node_id=BUCKET_ID,
            bucket_name=config.bucket_name,
            index_document=config.website_index_document,
        )
    )

    graph.add(
        DeploymentResource(
            node_id=DEPLOYMENT_ID,
            depends_on=(bucket.node_id,),
            source_path=resolve_asset_path(config.website_directory, base_dir),
            destination=bucket.node_id,
        )
    )

    if config.dns_config is not None:
        endpoint = EndpointRef(bucket.node_id, "website_endpoint")
        graph.add(build_alias(config.dns_config, endpoint))

    graph.add(
        OutputResource(
            node_id=OUTPUT_ID,
            depends_on=(bucket.node_id,),
            export_name=config.export_name,
            value=EndpointRef(bucket.node_id, "website_url"),
        )
    )
    return graph
