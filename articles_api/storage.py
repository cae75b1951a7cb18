"""S3 client construction shared by the object-store providers."""
import aioboto3
from botocore.config import Config

from articles_api.config import Settings


class S3ClientFactory:
    """
    Holds one aioboto3 session and hands out short-lived S3 clients.

    ``client()`` returns an async context manager; open one per operation.
    Blank credentials fall through to the default AWS credential chain.
    """

    def __init__(
        self,
        bucket_name: str,
        region_name: str = "us-east-1",
        access_key_id: str = "",
        secret_access_key: str = "",
        endpoint_url: str | None = None,
    ) -> None:
        self.bucket_name = bucket_name
        self.endpoint_url = endpoint_url
        self.session = aioboto3.Session(
            aws_access_key_id=access_key_id or None,
            aws_secret_access_key=secret_access_key or None,
            region_name=region_name,
        )
        # No retries: a failed call surfaces to the caller as-is.
        self.config = Config(
            retries={"max_attempts": 0, "mode": "standard"},
            connect_timeout=5,
            read_timeout=10,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ClientFactory":
        return cls(
            bucket_name=settings.S3_BUCKET_NAME,
            region_name=settings.AWS_REGION,
            access_key_id=settings.AWS_ACCESS_KEY_ID,
            secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            endpoint_url=settings.S3_ENDPOINT_URL,
        )

    @property
    def configured(self) -> bool:
        return bool(self.bucket_name)

    def client(self):
        kwargs = {"config": self.config}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return self.session.client("s3", **kwargs)
