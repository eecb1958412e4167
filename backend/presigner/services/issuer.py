import json
import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Protocol

from pydantic import BaseModel, Field

from presigner.core.config import Settings, get_settings
from presigner.core.errors import (
    InvalidParameter,
    MissingParameter,
    PresignError,
    SigningFailure,
)
from presigner.schemas import (
    ErrorResponse,
    PresignAction,
    PresignRequest,
    PresignResponse,
    SigningParameters,
)
from presigner.services.signing import S3Signer

logger = logging.getLogger(__name__)

RESPONSE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
}


class Signer(Protocol):
    async def generate_signed_url(
        self, action: PresignAction, params: SigningParameters
    ) -> str: ...


class IssuerResponse(BaseModel):
    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = Field(default_factory=lambda: dict(RESPONSE_HEADERS))

    def body_json(self) -> str:
        return json.dumps(self.body)

    def to_proxy(self) -> dict[str, Any]:
        """Lambda proxy integration shape: body is a JSON string."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body_json(),
        }


class UrlIssuer:
    """Validates a presign request and delegates the signing to the object store client."""

    def __init__(self, settings: Settings, signer: Signer) -> None:
        self.settings = settings
        self.signer = signer

    @staticmethod
    def parse(params: Mapping[str, str | None] | None) -> PresignRequest:
        params = params or {}

        key = params.get("key")
        if not key:
            raise MissingParameter('Missing "key" query parameter for the S3 object.')

        raw_action = params.get("action") or PresignAction.READ.value
        try:
            action = PresignAction(raw_action)
        except ValueError:
            raise InvalidParameter(
                'Invalid "action" specified. Must be "getObject" or "putObject".'
            ) from None

        return PresignRequest(
            key=key,
            action=action,
            content_type=params.get("contentType") or None,
        )

    async def issue(self, request: PresignRequest) -> PresignResponse:
        signing_params = SigningParameters.from_request(request, self.settings.s3_bucket_name)
        try:
            url = await self.signer.generate_signed_url(request.action, signing_params)
        except SigningFailure:
            raise
        except Exception as exc:
            raise SigningFailure("Failed to generate presigned URL.", detail=str(exc)) from exc

        logger.info("Issued presigned %s URL for %s", request.action.value, request.key)
        return PresignResponse(presigned_url=url, key=request.key, action=request.action)

    async def handle(self, params: Mapping[str, str | None] | None) -> IssuerResponse:
        try:
            request = self.parse(params)
            result = await self.issue(request)
        except SigningFailure as exc:
            logger.exception("Error generating presigned URL: %s", exc.detail)
            return self._error(exc)
        except PresignError as exc:
            logger.info("Rejected presign request: %s", exc.message)
            return self._error(exc)

        return IssuerResponse(
            status_code=HTTPStatus.OK,
            body=result.model_dump(mode="json", by_alias=True),
        )

    @staticmethod
    def _error(exc: PresignError) -> IssuerResponse:
        body = ErrorResponse(message=exc.message, error=exc.detail)
        return IssuerResponse(
            status_code=int(exc.status_code),
            body=body.model_dump(exclude_none=True),
        )


_issuer: UrlIssuer | None = None


def get_issuer() -> UrlIssuer:
    global _issuer
    if _issuer is None:
        settings = get_settings()
        _issuer = UrlIssuer(settings, S3Signer(settings))
    return _issuer


def reset_issuer() -> None:
    global _issuer
    _issuer = None
