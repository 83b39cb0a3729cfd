"""Source document readers for ingestion.

This module loads raw radar files from local paths or S3 locations.
Bytes are returned untouched so fingerprints cover the exact payload.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any, Iterable

from core.config import HfrConfig
from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import HfrDependencyError, HfrIngestError
from core.s3_uri import S3Location, parse_s3_uri
from core.types import RawDocument


def read_source_documents(source_uri: str, config: HfrConfig) -> list[RawDocument]:
    """Load raw documents from a local file, directory, or S3 URI.

    Args:
        source_uri: Local path or ``s3://bucket/key-or-prefix`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Ordered list of raw documents.

    Raises:
        HfrIngestError: If the source cannot be read or holds no radar files.
    """
    if source_uri.startswith("s3://"):
        return _read_s3_documents(source_uri, config)
    return _read_local_documents(Path(source_uri).expanduser())


def read_single_document(source_uri: str, config: HfrConfig) -> RawDocument:
    """Load exactly one raw document.

    Args:
        source_uri: Local file path or S3 object URI.
        config: Runtime configuration.

    Returns:
        The single document at the source.

    Raises:
        HfrIngestError: If the source resolves to zero or several files.
    """
    documents = read_source_documents(source_uri, config)
    if len(documents) != 1:
        raise HfrIngestError(
            f"Expected one radar file at {source_uri}, found {len(documents)}. "
            "Point the update at a single file."
        )
    return documents[0]


def _read_local_documents(source_path: Path) -> list[RawDocument]:
    """Read documents from the local file system.

    Args:
        source_path: Input file or directory.

    Returns:
        Collected documents; directories are scanned recursively.

    Raises:
        HfrIngestError: If path is missing or holds no radar files.
    """
    if not source_path.exists():
        raise HfrIngestError(
            f"Failed to read source at {source_path}: path does not exist. "
            "Provide an existing file or directory."
        )
    if source_path.is_file():
        return [_read_file_document(source_path)]
    documents = [
        _read_file_document(file_path)
        for file_path in sorted(source_path.rglob("*"))
        if file_path.is_file() and _is_supported_name(file_path.name)
    ]
    if not documents:
        raise HfrIngestError(
            f"No radar files found under {source_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    return documents


def _read_file_document(file_path: Path) -> RawDocument:
    try:
        data = file_path.read_bytes()
    except OSError as error:
        raise HfrIngestError(
            f"Failed to read source file {file_path}: {error.strerror}. "
            "Check file permissions and retry."
        ) from error
    return RawDocument(filename=file_path.name, data=data, source_uri=str(file_path))


def _read_s3_documents(source_uri: str, config: HfrConfig) -> list[RawDocument]:
    """Read documents from one S3 object or every radar object under a prefix.

    Args:
        source_uri: S3 object or prefix URI.
        config: Runtime configuration for region/profile.

    Returns:
        Loaded documents.

    Raises:
        HfrIngestError: If no radar objects are found.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    object_keys = _list_s3_keys(s3_client, location)
    documents = _download_s3_documents(s3_client, location.bucket, object_keys)
    if not documents:
        raise HfrIngestError(
            f"No radar objects found for {source_uri}. "
            f"Upload {SUPPORTED_SOURCE_EXTENSIONS} files and retry ingest."
        )
    return documents


def _create_s3_client(config: HfrConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        HfrDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise HfrDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install the 's3' extra to ingest from s3:// sources."
        ) from error
    session = boto3.session.Session(**_build_boto3_session_kwargs(config))
    return session.client("s3")


def _build_boto3_session_kwargs(config: HfrConfig) -> dict[str, str]:
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs


def _list_s3_keys(s3_client: Any, location: S3Location) -> list[str]:
    """List radar object keys matching a key or prefix.

    Args:
        s3_client: Boto3 S3 client.
        location: Target bucket/prefix.

    Returns:
        Sorted keys with supported extensions.
    """
    paginator = s3_client.get_paginator("list_objects_v2")
    pages = paginator.paginate(Bucket=location.bucket, Prefix=location.prefix)
    keys: list[str] = []
    for page in pages:
        for obj in page.get("Contents", []):
            key = obj["Key"]
            if _is_supported_name(key):
                keys.append(key)
    return sorted(keys)


def _download_s3_documents(
    s3_client: Any,
    bucket: str,
    object_keys: Iterable[str],
) -> list[RawDocument]:
    documents: list[RawDocument] = []
    for key in object_keys:
        data = s3_client.get_object(Bucket=bucket, Key=key)["Body"].read()
        documents.append(
            RawDocument(
                filename=PurePosixPath(key).name,
                data=data,
                source_uri=f"s3://{bucket}/{key}",
            )
        )
    return documents


def _is_supported_name(name: str) -> bool:
    """Return whether a file name or object key has a radar extension."""
    return PurePosixPath(name).suffix.lower() in SUPPORTED_SOURCE_EXTENSIONS
