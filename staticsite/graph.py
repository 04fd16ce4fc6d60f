"""
Resource graph: ordered, declarative resource nodes handed to Pulumi.

Nodes are plain frozen dataclasses and reference each other only by
``node_id``. Insertion order is the intended provisioning order. Node ids are
fixed names so Pulumi sees the same resources on every run and updates them
in place instead of replacing them.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

BUCKET_ID = "WebsiteBucket"
DEPLOYMENT_ID = "WebsiteBucketDeployment"
ALIAS_RECORD_ID = "WebsiteAliasRecord"
OUTPUT_ID = "WebsiteUrl"


class GraphError(RuntimeError):
    """Internal consistency failure while building a ResourceGraph."""


class DuplicateNodeError(GraphError):
    def __init__(self, node_id: str):
        super().__init__(f"Node '{node_id}' is already in the graph")
        self.node_id = node_id


class UnknownDependencyError(GraphError):
    def __init__(self, node_id: str, dependency: str):
        super().__init__(f"Node '{node_id}' depends on unknown node '{dependency}'")
        self.node_id = node_id
        self.dependency = dependency


@dataclass(frozen=True)
class EndpointRef:
    """Reference to an attribute another node exposes once provisioned."""

    node_id: str
    attribute: str


@dataclass(frozen=True)
class ResourceNode:
    node_id: str
    depends_on: tuple[str, ...] = ()


@dataclass(frozen=True)
class BucketResource(ResourceNode):
    """
    S3 bucket configured for static website hosting.

    Public reads are granted through a bucket policy; object ACLs are blocked
    (``block_public_acls`` / ``ignore_public_acls``) while public bucket
    policies stay allowed.
    """

    bucket_name: str = ""
    index_document: str = "index.html"
    public_read: bool = True
    block_public_acls: bool = True
    ignore_public_acls: bool = True
    block_public_policy: bool = False
    restrict_public_buckets: bool = False
    auto_delete_objects: bool = True


@dataclass(frozen=True)
class DeploymentResource(ResourceNode):
    """Upload of a local directory into a bucket node."""

    source_path: Path = field(default_factory=Path)
    destination: str = ""


@dataclass(frozen=True)
class AliasRecordResource(ResourceNode):
    """Route 53 alias record pointing at a bucket's website endpoint."""

    zone_name: str = ""
    hosted_zone_id: str = ""
    record_name: str = ""
    record_type: str = "A"
    target: EndpointRef | None = None


@dataclass(frozen=True)
class OutputResource(ResourceNode):
    """Stack export of another node's attribute."""

    export_name: str = ""
    value: EndpointRef | None = None


class ResourceGraph:
    """
    Append-only, ordered collection of ResourceNode.

    A node may only depend on nodes added before it, so iteration order is
    always a valid provisioning order.
    """

    def __init__(self):
        self._nodes: dict[str, ResourceNode] = {}

    def add(self, node: ResourceNode) -> ResourceNode:
        if node.node_id in self._nodes:
            raise DuplicateNodeError(node.node_id)
        for dependency in node.depends_on:
            if dependency not in self._nodes:
                raise UnknownDependencyError(node.node_id, dependency)
        self._nodes[node.node_id] = node
        return node

    def get(self, node_id: str) -> ResourceNode:
        return self._nodes[node_id]

    def node_ids(self) -> list[str]:
        return list(self._nodes)

    def edges(self) -> list[tuple[str, str]]:
        """Return (node_id, dependency_id) pairs in insertion order."""
        return [
            (node.node_id, dependency)
            for node in self._nodes.values()
            for dependency in node.depends_on
        ]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[ResourceNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)
