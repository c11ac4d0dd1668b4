"""
Products API router.

Thin HTTP boundary: builds requests through ``ProductService`` and leaves
error mapping to the registered exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from .models import Product
from .service import ProductService
from ...core.dependencies import get_product_service
from ...shared.responses import BaseResponse, CreatedResponse, ErrorResponse, success_response, created_response

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={
        400: {"model": ErrorResponse, "description": "No handler bound for the request"},
        422: {"model": ErrorResponse, "description": "Invalid product payload"},
        504: {"model": ErrorResponse, "description": "Dispatch deadline exceeded"}
    }
)


@router.post(
    "",
    response_model=CreatedResponse[Product],
    status_code=status.HTTP_201_CREATED,
    summary="Add a product",
    operation_id="add_product"
)
async def add_product(
    product: Product,
    request: Request,
    service: ProductService = Depends(get_product_service)
):
    """Dispatch an AddProductCommand for the posted product."""
    await service.submit_command(product)
    return created_response(
        data=product,
        location=f"{request.url.path}/{product.id}",
        message="Product created successfully"
    )


@router.get(
    "",
    response_model=BaseResponse[List[Product]],
    summary="List products",
    operation_id="get_products"
)
async def get_products(service: ProductService = Depends(get_product_service)):
    """Dispatch a GetProductsQuery and return every product in insertion order."""
    products = await service.submit_query()
    return success_response(
        data=products,
        message="Products retrieved successfully",
        metadata={"count": len(products)}
    )
