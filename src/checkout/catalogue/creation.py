"""Catalogue administration — commands and handlers for products and delivery methods."""

from protean import handle
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from checkout.catalogue.delivery import DeliveryMethod
from checkout.catalogue.product import Product
from checkout.domain import checkout


@checkout.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    premium_price = Float(min_value=0.0)


@checkout.command(part_of="DeliveryMethod")
class AddDeliveryMethod:
    name = String(required=True, max_length=100)
    price = Float(required=True, min_value=0.0)
    premium_price = Float(min_value=0.0)
    eta = Integer(required=True, min_value=0)


@checkout.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            premium_price=command.premium_price,
            description=command.description,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)


@checkout.command_handler(part_of=DeliveryMethod)
class AddDeliveryMethodHandler:
    @handle(AddDeliveryMethod)
    def add_delivery_method(self, command):
        method = DeliveryMethod(
            name=command.name,
            price=command.price,
            premium_price=command.price if command.premium_price is None else command.premium_price,
            eta=command.eta,
        )
        current_domain.repository_for(DeliveryMethod).add(method)
        return str(method.id)
