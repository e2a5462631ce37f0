# models/product.py
import logging
from dataclasses import dataclass, replace

from models.coupon import Coupon

logger = logging.getLogger("shopping_cart.product")


# Product model representing an item that can be put in a shopping cart.
# The name is fixed once created, the price can change (coupons).
@dataclass
class Product:
    name: str
    price: float

    def __setattr__(self, key, value):
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("The product name cannot be changed.")
        super().__setattr__(key, value)

    def apply(self, coupon: Coupon) -> None:
        # price * (1 - discount/100), discount clamped to [0, 100]
        if not coupon.is_in_range:
            logger.warning(
                "Coupon %r has discount %s outside 0-100, clamping",
                coupon.name,
                coupon.discount,
            )
        self.price *= coupon.multiplier

    def copy(self) -> "Product":
        return replace(self)
