from fastapi import Request

from presigner.services.issuer import UrlIssuer


def get_url_issuer(request: Request) -> UrlIssuer:
    return request.app.state.url_issuer
