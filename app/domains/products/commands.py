"""Product commands."""

from .models import Product
from ...shared.cqrs.commands import Command


class AddProductCommand(Command):
    """Command to append a product to the catalogue."""

    product: Product
