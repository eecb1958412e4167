import asyncio
import logging

import boto3
from botocore.client import Config

from presigner.core.config import Settings
from presigner.core.errors import SigningFailure
from presigner.schemas import PresignAction, SigningParameters

logger = logging.getLogger(__name__)


class S3Signer:
    """Thin wrapper over boto3's presigner.

    The client only holds read-only configuration, so one instance is shared
    by every invocation in the process. Credentials come from the default
    boto3 chain (execution role, env vars, profile).
    """

    def __init__(self, settings: Settings) -> None:
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            endpoint_url=str(settings.s3_endpoint) if settings.s3_endpoint else None,
            region_name=settings.aws_region,
            config=Config(signature_version="s3v4"),
        )
        logger.info(
            "Initialized S3 signer (region=%s, endpoint=%s)",
            settings.aws_region,
            settings.s3_endpoint,
        )

    def _sign(self, action: PresignAction, params: SigningParameters) -> str:
        if not params.bucket:
            raise ValueError("S3 bucket name is not configured")

        request_params = {"Bucket": params.bucket, "Key": params.key}
        if params.content_type:
            request_params["ContentType"] = params.content_type

        return self.client.generate_presigned_url(
            action.client_method,
            Params=request_params,
            ExpiresIn=params.expires_in,
        )

    async def generate_signed_url(
        self, action: PresignAction, params: SigningParameters
    ) -> str:
        try:
            return await asyncio.to_thread(self._sign, action, params)
        except Exception as exc:
            raise SigningFailure("Failed to generate presigned URL.", detail=str(exc)) from exc
