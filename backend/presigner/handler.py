"""AWS Lambda entry point for API Gateway proxy events."""
import asyncio
from typing import Any

from presigner.core.config import get_settings
from presigner.core.logging import configure_logging
from presigner.services.issuer import get_issuer

configure_logging(get_settings())


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    params = (event or {}).get("queryStringParameters")
    response = asyncio.run(get_issuer().handle(params))
    return response.to_proxy()
