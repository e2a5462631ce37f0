# models/cart.py
import logging

from models.coupon import Coupon
from models.product import Product

logger = logging.getLogger("shopping_cart.cart")


# Cart model representing a shopping cart.
# The cart owns its products: it stores copies of what it is given and
# hands out copies, so nothing outside can change the prices inside.
class ShoppingCart:
    def __init__(self):
        self._products: list[Product] = []

    def __len__(self) -> int:
        return len(self._products)

    def add(self, product: Product) -> None:
        self._products.append(product.copy())
        logger.debug("Added %s (%.2f)", product.name, product.price)

    def remove(self, product: Product) -> None:
        # Remove the first equal product. Nothing happens if it is not in the cart.
        for index, item in enumerate(self._products):
            if item == product:
                del self._products[index]
                logger.debug("Removed %s", product.name)
                return
        logger.debug("Remove skipped, %s not in cart", product.name)

    @property
    def total_price(self) -> float:
        return sum(p.price for p in self._products)

    def apply(self, coupon: Coupon) -> None:
        for product in self._products:
            product.apply(coupon)
        logger.debug("Applied coupon %r to %d products", coupon.name, len(self._products))

    def get_products(self) -> tuple[Product, ...]:
        # Snapshot in insertion order.
        return tuple(p.copy() for p in self._products)
