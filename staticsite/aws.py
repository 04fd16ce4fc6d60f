"""
AWS static hosting: materialize a ResourceGraph as Pulumi resources.

This component walks a ResourceGraph in order and creates the matching
pulumi_aws resources: an S3 bucket with website hosting and a public-read
bucket policy, a synced folder uploading the site assets, an optional
Route 53 alias record pointing at the bucket website endpoint, and the
stack exports. Pulumi resource names are the graph node ids, so repeated runs
update the same resources in place. Exports are collected in ``exports`` for
the entrypoint to pass to ``pulumi.export``.
"""

import pulumi
import pulumi_aws as aws
import pulumi_synced_folder as synced_folder

from staticsite._helpers import public_read_policy, website_url
from staticsite.graph import (
    AliasRecordResource,
    BucketResource,
    DeploymentResource,
    EndpointRef,
    OutputResource,
    ResourceGraph,
    ResourceNode,
)

ID: str = "s3website:aws:StaticWebsite"

# ACLs are disabled on the bucket; the bucket owner owns every object.
OBJECT_OWNERSHIP = "BucketOwnerEnforced"
# The only canned ACL S3 accepts once ACLs are disabled. Public reads come
# from the bucket policy.
OBJECT_ACL = "bucket-owner-full-control"


class StaticWebsite(pulumi.ComponentResource):
    """
    S3 website bucket + asset upload + optional Route 53 alias.

    Resources: Bucket, BucketWebsiteConfiguration, BucketOwnershipControls,
    BucketPublicAccessBlock, BucketPolicy, S3BucketFolder and, when the graph
    has an alias node, a Route 53 A record.
    """

    def __init__(
        self,
        name: str,
        graph: ResourceGraph,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create one group of Pulumi resources per graph node.

        Args:
            name: Pulumi name of the component.
            graph: Assembled website graph; iterated in insertion order.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            resources: Node id -> primary Pulumi resource for that node.
            exports: Export name -> Output[str] for every output node.
        """
        super().__init__(ID, name, None, opts)

        self.resources: dict[str, pulumi.Resource] = {}
        self._attributes: dict[EndpointRef, pulumi.Output[str]] = {}
        self._bucket_ready: dict[str, list[pulumi.Resource]] = {}
        self.exports: dict[str, pulumi.Output[str]] = {}

        builders = {
            BucketResource: self._bucket,
            DeploymentResource: self._deployment,
            AliasRecordResource: self._alias_record,
            OutputResource: self._output,
        }
        for node in graph:
            builder = builders.get(type(node))
            if builder is None:
                raise TypeError(f"Unsupported resource node: {type(node).__name__}")
            builder(node)
            pulumi.log.info(f"{name}: declared {type(node).__name__} '{node.node_id}'")

        self.register_outputs(dict(self.exports))

    def _opts(self, node: ResourceNode, *extra: pulumi.Resource) -> pulumi.ResourceOptions:
        # Child resources get parent=self; graph edges become explicit depends_on.
        depends_on = [self.resources[dep] for dep in node.depends_on]
        depends_on.extend(extra)
        return pulumi.ResourceOptions(parent=self, depends_on=depends_on or None)

    def _attribute(self, ref: EndpointRef | None) -> pulumi.Output[str]:
        if ref is None or ref not in self._attributes:
            raise KeyError(f"No attribute registered for {ref}")
        return self._attributes[ref]

    def _bucket(self, node: BucketResource) -> None:
        # force_destroy empties the bucket on delete so it never blocks teardown.
        bucket = aws.s3.Bucket(
            resource_name=node.node_id,
            bucket=node.bucket_name,
            force_destroy=node.auto_delete_objects,
            opts=self._opts(node),
        )
        child_opts = pulumi.ResourceOptions(parent=self)

        website = aws.s3.BucketWebsiteConfiguration(
            resource_name=f"{node.node_id}-website",
            bucket=bucket.id,
            index_document=aws.s3.BucketWebsiteConfigurationIndexDocumentArgs(
                suffix=node.index_document,
            ),
            opts=child_opts,
        )

        ownership = aws.s3.BucketOwnershipControls(
            resource_name=f"{node.node_id}-ownership",
            bucket=bucket.id,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership=OBJECT_OWNERSHIP,
            ),
            opts=child_opts,
        )

        access_block = aws.s3.BucketPublicAccessBlock(
            resource_name=f"{node.node_id}-public-access",
            bucket=bucket.id,
            block_public_acls=node.block_public_acls,
            ignore_public_acls=node.ignore_public_acls,
            block_public_policy=node.block_public_policy,
            restrict_public_buckets=node.restrict_public_buckets,
            opts=child_opts,
        )

        # A public policy is rejected until the access block allows it.
        policy_deps: list[pulumi.Resource] = [access_block, ownership]
        if node.public_read:
            policy = aws.s3.BucketPolicy(
                resource_name=f"{node.node_id}-policy",
                bucket=bucket.id,
                policy=bucket.bucket.apply(public_read_policy),
                opts=pulumi.ResourceOptions(parent=self, depends_on=policy_deps),
            )
            policy_deps = [policy]

        self.resources[node.node_id] = bucket
        # Uploads wait for the policy and ownership rules to be in place.
        self._bucket_ready[node.node_id] = [website, *policy_deps]
        self._attributes[EndpointRef(node.node_id, "bucket_name")] = bucket.bucket
        self._attributes[EndpointRef(node.node_id, "hosted_zone_id")] = bucket.hosted_zone_id
        self._attributes[EndpointRef(node.node_id, "website_domain")] = website.website_domain
        self._attributes[EndpointRef(node.node_id, "website_endpoint")] = website.website_endpoint
        self._attributes[EndpointRef(node.node_id, "website_url")] = (
            website.website_endpoint.apply(website_url)
        )

    def _deployment(self, node: DeploymentResource) -> None:
        folder = synced_folder.S3BucketFolder(
            node.node_id,
            path=str(node.source_path),
            bucket_name=self._attribute(EndpointRef(node.destination, "bucket_name")),
            acl=OBJECT_ACL,
            opts=self._opts(node, *self._bucket_ready[node.destination]),
        )
        self.resources[node.node_id] = folder

    def _alias_record(self, node: AliasRecordResource) -> None:
        target = node.target
        if target is None:
            raise KeyError(f"Alias record '{node.node_id}' has no target")

        # S3 website alias targets use the website domain and the bucket's
        # regional hosted zone, not the record's own zone.
        alias = aws.route53.RecordAliasArgs(
            name=self._attribute(EndpointRef(target.node_id, "website_domain")),
            zone_id=self._attribute(EndpointRef(target.node_id, "hosted_zone_id")),
            evaluate_target_health=False,
        )
        record = aws.route53.Record(
            resource_name=node.node_id,
            name=node.record_name,
            type=node.record_type,
            zone_id=node.hosted_zone_id,
            aliases=[alias],
            opts=self._opts(node),
        )
        self.resources[node.node_id] = record
        self._attributes[EndpointRef(node.node_id, "fqdn")] = record.fqdn

    def _output(self, node: OutputResource) -> None:
        self.exports[node.export_name] = self._attribute(node.value)
