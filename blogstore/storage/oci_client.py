"""OCI object storage client over the Amazon S3 Compatibility API.

OCI exposes every tenancy namespace as an S3-compatible endpoint:
https://<namespace>.compat.objectstorage.<region>.oraclecloud.com

This lets the blog talk to its bucket with boto3, using a customer secret
key (access key ID + secret) instead of the OCI API signing key. Requests
must be SigV4-signed and path-style addressed.
"""

import logging
from typing import BinaryIO, Optional

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

COMPAT_ENDPOINT_TEMPLATE = "https://{namespace}.compat.objectstorage.{region}.oraclecloud.com"


class OCIObjectStorageClient:
    """Put/delete client for one OCI namespace.

    botocore errors (ClientError, BotoCoreError) are not caught here; the
    storage service wraps them.

    Attributes:
        region: OCI region identifier
        namespace: Namespace the endpoint is bound to
        endpoint_url: S3 compatibility endpoint in use
        _s3: Boto3 S3 client instance
    """

    def __init__(
        self,
        region: str,
        namespace: str,
        access_key: str,
        secret_key: str,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """Initialize the boto3 client for the namespace's compat endpoint.

        Args:
            region: OCI region identifier (e.g. us-ashburn-1)
            namespace: Object storage namespace
            access_key: Customer secret key ID
            secret_key: Customer secret key
            endpoint_url: Endpoint override (e.g. a local S3 emulator)
        """
        self.region = region
        self.namespace = namespace
        self.endpoint_url = endpoint_url or COMPAT_ENDPOINT_TEMPLATE.format(
            namespace=namespace,
            region=region,
        )

        self._s3 = boto3.client(
            "s3",
            region_name=region,
            endpoint_url=self.endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        logger.debug(f"Object storage client ready for {self.endpoint_url}")

    def _check_namespace(self, namespace: str) -> None:
        if namespace != self.namespace:
            raise ValueError(
                f"Client is bound to namespace {self.namespace!r}, got {namespace!r}"
            )

    def put_object(
        self,
        namespace: str,
        bucket: str,
        object_name: str,
        body: BinaryIO,
        content_type: str,
        content_length: int,
    ) -> None:
        """Write body to bucket/object_name, replacing any existing object.

        Args:
            namespace: Namespace of the bucket
            bucket: Bucket name
            object_name: Object key
            body: Binary stream to upload
            content_type: MIME type stored with the object
            content_length: Number of bytes in body

        Raises:
            ValueError: If namespace is not the client's namespace
            botocore.exceptions.ClientError: If the service rejects the request
            botocore.exceptions.BotoCoreError: On connection or signing failures
        """
        self._check_namespace(namespace)
        self._s3.put_object(
            Bucket=bucket,
            Key=object_name,
            Body=body,
            ContentType=content_type,
            ContentLength=content_length,
        )

    def delete_object(self, namespace: str, bucket: str, object_name: str) -> None:
        """Delete bucket/object_name.

        Args:
            namespace: Namespace of the bucket
            bucket: Bucket name
            object_name: Object key

        Raises:
            ValueError: If namespace is not the client's namespace
            botocore.exceptions.ClientError: If the service rejects the request
            botocore.exceptions.BotoCoreError: On connection or signing failures
        """
        self._check_namespace(namespace)
        self._s3.delete_object(Bucket=bucket, Key=object_name)
