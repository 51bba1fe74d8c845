"""Basket item management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from checkout.basket.basket import Basket
from checkout.domain import checkout


@checkout.command(part_of="Basket")
class AddToBasket:
    basket_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@checkout.command(part_of="Basket")
class UpdateBasketQuantity:
    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)
    new_quantity = Integer(required=True, min_value=1)


@checkout.command(part_of="Basket")
class RemoveFromBasket:
    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)


@checkout.command_handler(part_of=Basket)
class ManageBasketItemsHandler:
    @handle(AddToBasket)
    def add_to_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(basket)

    @handle(UpdateBasketQuantity)
    def update_basket_quantity(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.update_item_quantity(item_id=command.item_id, new_quantity=command.new_quantity)
        repo.add(basket)

    @handle(RemoveFromBasket)
    def remove_from_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.remove_item(item_id=command.item_id)
        repo.add(basket)
