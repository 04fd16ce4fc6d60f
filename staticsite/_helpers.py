"""
Pure helpers for bucket policy, URLs and asset paths. Testable without Pulumi runtime.

Used by the AWS component (public_read_policy, website_url) and the graph
assembler (resolve_asset_path). No Pulumi types; all functions accept and
return plain Python types so they can be unit-tested without a Pulumi stack.
"""

import json
from pathlib import Path


def public_read_policy(
    bucket_name: str,
) -> str:
    """
    Return a bucket policy document allowing anonymous s3:GetObject.

    Object ACLs stay blocked on the bucket; public reads are granted only
    through this policy.
    """
    return json.dumps(
        {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Effect": "Allow",
                    "Principal": {"AWS": "*"},
                    "Action": "s3:GetObject",
                    "Resource": f"arn:aws:s3:::{bucket_name}/*",
                }
            ],
        }
    )


def website_url(
    endpoint: str,
) -> str:
    """
    Return the HTTP URL for an S3 website endpoint.

    S3 website endpoints only serve plain HTTP. Idempotent if a scheme is
    already present.
    """
    if endpoint.startswith(("http://", "https://")):
        return endpoint
    return f"http://{endpoint}"


def resolve_asset_path(
    directory: str,
    base_dir: Path,
) -> Path:
    """
    Resolve the website asset directory against a fixed base directory.

    Args:
        directory: Configured directory (e.g. "./website"). Absolute paths are
            kept as they are.
        base_dir: Directory relative paths are anchored to. Never the process
            working directory.

    Returns:
        Absolute, normalized path (e.g. "/srv/project/website").
    """
    path = Path(directory).expanduser()
    if not path.is_absolute():
        path = Path(base_dir) / path
    return path.resolve()
