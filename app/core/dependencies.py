"""
FastAPI dependencies.

Resolve collaborators from the container built during application startup.
"""

from fastapi import Request

from .container import AppContainer
from ..domains.products.service import ProductService


def get_app_container(request: Request) -> AppContainer:
    """FastAPI dependency to get the application container"""
    return request.app.state.container


def get_product_service(request: Request) -> ProductService:
    """Get ProductService instance"""
    return get_app_container(request).product_service
