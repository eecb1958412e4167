from fastapi import APIRouter, Depends, Query, Response

from presigner.api.deps import get_url_issuer
from presigner.services.issuer import UrlIssuer

router = APIRouter(tags=["presign"])


@router.get("/presign")
async def presign(
    key: str | None = Query(default=None, description="Object key in the bucket"),
    action: str | None = Query(default=None, description="getObject (default) or putObject"),
    content_type: str | None = Query(
        default=None,
        alias="contentType",
        description="Content type signed into putObject URLs",
    ),
    issuer: UrlIssuer = Depends(get_url_issuer),
) -> Response:
    result = await issuer.handle({"key": key, "action": action, "contentType": content_type})
    return Response(
        content=result.body_json(),
        status_code=result.status_code,
        headers=result.headers,
    )
