from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PRESIGNED_URL_TTL_SECONDS = 300


class PresignAction(str, Enum):
    READ = "getObject"
    WRITE = "putObject"

    @property
    def client_method(self) -> str:
        return "get_object" if self is PresignAction.READ else "put_object"


class PresignRequest(BaseModel):
    key: str = Field(..., min_length=1)
    action: PresignAction = PresignAction.READ
    content_type: str | None = None


class SigningParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    bucket: str
    key: str
    expires_in: int = PRESIGNED_URL_TTL_SECONDS
    content_type: str | None = None

    @classmethod
    def from_request(cls, request: PresignRequest, bucket: str) -> "SigningParameters":
        content_type = request.content_type if request.action is PresignAction.WRITE else None
        return cls(bucket=bucket, key=request.key, content_type=content_type)


class PresignResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    presigned_url: str = Field(alias="presignedUrl")
    key: str
    action: PresignAction


class ErrorResponse(BaseModel):
    message: str
    error: str | None = None
