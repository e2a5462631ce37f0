# models/coupon.py
import math
from dataclasses import dataclass

MIN_DISCOUNT = 0.0
MAX_DISCOUNT = 100.0


@dataclass(frozen=True)
class Coupon:
    """
    A named percentage discount, e.g. Coupon("Holiday Sale", 20) is 20% off.

    The discount is stored exactly as given. When it is applied to a price
    it is clamped to [0, 100]:
        discount > 100  -> price becomes 0 (never negative)
        discount < 0    -> price is unchanged
        discount NaN    -> price is unchanged
    """

    name: str
    discount: float

    @property
    def is_in_range(self) -> bool:
        return MIN_DISCOUNT <= self.discount <= MAX_DISCOUNT

    @property
    def multiplier(self) -> float:
        # factor a price is multiplied by when this coupon is applied
        if math.isnan(self.discount):
            return 1.0
        discount = min(max(self.discount, MIN_DISCOUNT), MAX_DISCOUNT)
        return 1.0 - discount / 100.0
