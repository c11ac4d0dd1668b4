"""
Unit tests for settings and the composition root.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.container import build_container, configure_mediator
from app.domains.products.commands import AddProductCommand
from app.domains.products.queries import GetProductsQuery
from app.domains.products.store import ProductDataStore
from app.shared.exceptions import RegistryFrozenError
from app.domains.products.handlers import GetProductsHandler


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api"
        assert settings.seed_sample_products is True
        assert settings.validate_product_names is False
        assert settings.dispatch_timeout_seconds == 30.0

    def test_log_level_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_timeout_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, dispatch_timeout_seconds=0)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SEED_SAMPLE_PRODUCTS", "false")
        monkeypatch.setenv("VALIDATE_PRODUCT_NAMES", "true")

        settings = Settings(_env_file=None)

        assert settings.seed_sample_products is False
        assert settings.validate_product_names is True


class TestContainer:

    def test_seeded_container(self, test_settings):
        container = build_container(test_settings)

        assert len(container.store) == 3
        assert container.mediator.is_frozen
        assert set(container.mediator.registered_requests()) == {AddProductCommand, GetProductsQuery}
        assert container.product_service.dispatch_timeout == test_settings.dispatch_timeout_seconds

    def test_unseeded_container(self):
        container = build_container(Settings(_env_file=None, seed_sample_products=False))

        assert len(container.store) == 0

    def test_given_store_is_shared(self, test_settings):
        store = ProductDataStore()
        container = build_container(test_settings, store=store)

        assert container.store is store
        assert container.mediator.handler_for(GetProductsQuery).store is store
        assert container.mediator.handler_for(AddProductCommand).store is store

    def test_validation_flag_reaches_handler(self):
        mediator = configure_mediator(
            ProductDataStore(),
            Settings(_env_file=None, validate_product_names=True)
        )

        assert mediator.handler_for(AddProductCommand).validate_names is True

    def test_registry_closed_after_configuration(self, store, test_settings):
        mediator = configure_mediator(store, test_settings)

        with pytest.raises(RegistryFrozenError):
            mediator.register(GetProductsQuery, GetProductsHandler(store))
