"""Product endpoints.

Read-only. The list and search endpoints return the full result set;
paging, sorting and the interactive search run in the views.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.deps import Products
from catalog.infra.logging import get_logger
from catalog.schemas.common import ErrorResponse
from catalog.schemas.product import ProductDetailResponse, ProductListResponse, ProductOut

router = APIRouter()
logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.get(
    "",
    response_model=ProductListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_products(products: Products) -> ProductListResponse | JSONResponse:
    """All products ordered by product_id."""
    try:
        rows = await products.list_all()
    except SQLAlchemyError as e:
        logger.error("Failed to list products", error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching data")

    data = [ProductOut.model_validate(row) for row in rows]
    return ProductListResponse(data=data, total=len(data))


@router.get(
    "/search/{keyword}",
    response_model=ProductListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def search_products(keyword: str, products: Products) -> ProductListResponse | JSONResponse:
    """Products whose name or description contains the keyword, most stock first."""
    try:
        rows = await products.search(keyword)
    except SQLAlchemyError as e:
        logger.error("Failed to search products", keyword=keyword, error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error searching products")

    data = [ProductOut.model_validate(row) for row in rows]
    return ProductListResponse(data=data, total=len(data))


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_product(product_id: int, products: Products) -> ProductDetailResponse | JSONResponse:
    """Single product, 404 when absent."""
    try:
        row = await products.get_by_id(product_id)
    except SQLAlchemyError as e:
        logger.error("Failed to fetch product", product_id=product_id, error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching product")

    if row is None:
        logger.info("Product not found", product_id=product_id)
        return _error(status.HTTP_404_NOT_FOUND, "Product not found")

    return ProductDetailResponse(data=ProductOut.model_validate(row))
