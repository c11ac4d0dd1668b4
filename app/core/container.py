"""
Application composition root.

Builds the data store, the handlers and the mediator once at startup and
binds every request type explicitly. The resulting container is held on
``app.state`` for the lifetime of the process.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings, settings as default_settings
from ..domains.products.commands import AddProductCommand
from ..domains.products.handlers import AddProductHandler, GetProductsHandler
from ..domains.products.queries import GetProductsQuery
from ..domains.products.service import ProductService
from ..domains.products.store import ProductDataStore
from ..shared.cqrs.mediator import Mediator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Process-wide collaborators created during startup"""
    settings: Settings
    store: ProductDataStore
    mediator: Mediator
    product_service: ProductService


def configure_mediator(store: ProductDataStore, app_settings: Settings) -> Mediator:
    """
    Bind every request type to its handler and freeze the registry.

    Raises:
        DuplicateRegistrationError: If a request type is bound twice
    """
    mediator = Mediator()
    mediator.register(
        AddProductCommand,
        AddProductHandler(store, validate_names=app_settings.validate_product_names)
    )
    mediator.register(GetProductsQuery, GetProductsHandler(store))
    mediator.freeze()
    return mediator


def build_container(
    app_settings: Optional[Settings] = None,
    store: Optional[ProductDataStore] = None
) -> AppContainer:
    """
    Create the application's collaborators.

    Args:
        app_settings: Settings to use; the module settings by default
        store: Pre-built store; otherwise one is created (seeded when
            ``seed_sample_products`` is on)
    """
    app_settings = app_settings or default_settings

    if store is None:
        if app_settings.seed_sample_products:
            store = ProductDataStore.with_sample_products()
        else:
            store = ProductDataStore()

    mediator = configure_mediator(store, app_settings)
    product_service = ProductService(mediator, dispatch_timeout=app_settings.dispatch_timeout_seconds)

    logger.info(
        f"Container built: {len(store)} seeded products, "
        f"{len(mediator.registered_requests())} request bindings"
    )
    return AppContainer(
        settings=app_settings,
        store=store,
        mediator=mediator,
        product_service=product_service
    )
