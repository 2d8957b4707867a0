from foodorder.models.user import User
from foodorder.models.restaurant import Restaurant
from foodorder.models.food import Food
from foodorder.models.order import Order

__all__ = ["User", "Restaurant", "Food", "Order"]
