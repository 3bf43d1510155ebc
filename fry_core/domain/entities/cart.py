"""
Shopping cart.

Customer-side working state before checkout. Converted into immutable
OrderItem snapshots when the order is placed.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import uuid

from ..value_objects import Money
from .order import OrderItem


@dataclass(frozen=True)
class ProductSnapshot:
    """Catalogue product as seen when it was added to the cart."""
    id: str
    name: str
    price: Money
    category_id: str = ""
    image: str = ""
    is_prize: bool = False
    points_required: Optional[int] = None

    def __post_init__(self):
        if self.price.is_negative():
            raise ValueError(f"Product price cannot be negative: {self.price}")


@dataclass(frozen=True)
class CartExtra:
    """Add-on product bought together with a cart item."""
    product: ProductSnapshot
    quantity: int = 1

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError("The quantity must be a positive number.")

    @property
    def total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class CartItem:
    id: str
    product: ProductSnapshot
    quantity: int = 1
    selected_drink: Optional[ProductSnapshot] = None
    extras: List[CartExtra] = field(default_factory=list)
    notes: Optional[str] = None
    is_prize_redemption: bool = False

    @property
    def unit_price(self) -> Money:
        """Product price plus all extras, for one unit."""
        price = self.product.price
        for extra in self.extras:
            price = price + extra.total
        return price

    @property
    def line_total(self) -> Money:
        if self.is_prize_redemption:
            return Money.zero(self.product.price.currency)
        return self.unit_price * self.quantity

    @property
    def points_required(self) -> int:
        if not self.is_prize_redemption:
            return 0
        return (self.product.points_required or 0) * self.quantity


class Cart:
    """In-memory cart. Prize items are free but cost loyalty points."""

    def __init__(self, currency: str = "HNL"):
        self.currency = currency
        self.items: List[CartItem] = []

    def add_item(
        self,
        product: ProductSnapshot,
        selected_drink: Optional[ProductSnapshot] = None,
        extras: Sequence[CartExtra] = (),
        notes: Optional[str] = None,
        is_prize: bool = False,
        quantity: int = 1,
    ) -> CartItem:
        if quantity <= 0:
            raise ValueError("The quantity must be a positive number.")
        if product.price.currency != self.currency:
            raise ValueError(
                f"Product {product.id} priced in {product.price.currency}, cart is in {self.currency}"
            )
        item = CartItem(
            id=f"{product.id}-{uuid.uuid4().hex[:8]}",
            product=product,
            quantity=quantity,
            selected_drink=selected_drink,
            extras=list(extras),
            notes=notes,
            is_prize_redemption=is_prize or product.is_prize,
        )
        self.items.append(item)
        return item

    def remove_item(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    def update_quantity(self, item_id: str, quantity: int) -> None:
        # Anything below one removes the line.
        if quantity < 1:
            self.remove_item(item_id)
            return
        for item in self.items:
            if item.id == item_id:
                item.quantity = quantity

    def clear(self) -> None:
        self.items.clear()

    def is_empty(self) -> bool:
        return not self.items

    def subtotal(self) -> Money:
        """Sum of paid lines; prize redemptions cost nothing."""
        total = Money.zero(self.currency)
        for item in self.items:
            total = total + item.line_total
        return total

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def prize_items(self) -> List[CartItem]:
        return [item for item in self.items if item.is_prize_redemption]

    def points_required(self) -> int:
        return sum(item.points_required for item in self.items)

    def to_order_items(self) -> List[OrderItem]:
        """Freeze the cart into order line snapshots."""
        return [
            OrderItem(
                product_id=item.product.id,
                product_name=item.product.name,
                product_image=item.product.image,
                quantity=item.quantity,
                unit_price=(
                    Money.zero(self.currency) if item.is_prize_redemption else item.unit_price
                ),
                selected_drink=item.selected_drink.name if item.selected_drink else None,
                is_prize_redemption=item.is_prize_redemption,
                points_used=item.points_required,
            )
            for item in self.items
        ]
