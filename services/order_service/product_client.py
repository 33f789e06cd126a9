import httpx
import structlog
from fastapi import Request
from pydantic import ValidationError

from shared.config import settings
from .exceptions import ProductNotFoundError, ProductServiceError
from .schemas import Product

logger = structlog.get_logger(__name__)


class ProductClient:
    """
    Resolves product ids against the remote product service.

    Wraps one long-lived httpx.AsyncClient, so connection pooling and
    timeouts are handled by httpx rather than per call.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = settings.PRODUCT_SERVICE_URL):
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def get_product(self, product_id) -> Product:
        url = f"{self.base_url}/products/{product_id}"
        try:
            resp = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("product_lookup_failed", product_id=product_id, error=str(e))
            raise ProductServiceError(product_id, str(e)) from e

        if resp.status_code == 404:
            raise ProductNotFoundError(product_id)

        try:
            resp.raise_for_status()
            return Product.model_validate(resp.json())
        except (httpx.HTTPStatusError, ValueError, ValidationError) as e:
            logger.warning(
                "product_lookup_failed",
                product_id=product_id,
                status_code=resp.status_code,
                error=str(e),
            )
            raise ProductServiceError(product_id, str(e)) from e

    async def close(self):
        await self.client.aclose()


def build_product_client() -> ProductClient:
    http = httpx.AsyncClient(timeout=settings.PRODUCT_SERVICE_TIMEOUT)
    return ProductClient(http, settings.PRODUCT_SERVICE_URL)


def get_product_client(request: Request) -> ProductClient:
    return request.app.state.products
