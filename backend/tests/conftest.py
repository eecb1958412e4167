import importlib
import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from presigner.core.config import get_settings
from presigner.schemas import PresignAction, SigningParameters
from presigner.services import issuer as issuer_service


class DummySigner:
    """Records every signing call and returns a predictable URL."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[PresignAction, SigningParameters]] = []
        self.error = error

    async def generate_signed_url(
        self, action: PresignAction, params: SigningParameters
    ) -> str:
        self.calls.append((action, params))
        if self.error is not None:
            raise self.error
        return (
            f"https://{params.bucket}.s3.example.com/{params.key}"
            f"?X-Amz-Expires={params.expires_in}&n={len(self.calls)}"
        )


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    os.environ["ENV"] = "test"
    os.environ["AWS_REGION"] = "us-east-1"
    os.environ["S3_BUCKET_NAME"] = "test-bucket"
    os.environ.pop("S3_ENDPOINT_URL", None)
    get_settings.cache_clear()
    issuer_service.reset_issuer()


@pytest.fixture
def signer_factory():
    return DummySigner


@pytest.fixture
def signer(signer_factory) -> DummySigner:
    return signer_factory()


@pytest.fixture
def url_issuer(signer):
    return issuer_service.UrlIssuer(get_settings(), signer)


@pytest.fixture(scope="session")
def app_instance(configure_environment):
    from presigner import main as app_module

    importlib.reload(app_module)
    return app_module.app


@pytest_asyncio.fixture
async def client(app_instance, url_issuer):
    # Mimic the lifespan hook with an issuer backed by the dummy signer
    app_instance.state.url_issuer = url_issuer
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
