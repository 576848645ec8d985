#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from freshcart.data.models.user import UserModel
from freshcart.data.models.category import CategoryModel
from freshcart.data.models.product import ProductModel
from freshcart.data.models.order import OrderModel
from freshcart.data.models.order_item import OrderItemModel
from freshcart.data.models.payment import PaymentModel
from freshcart.data.models.contact_submission import ContactSubmissionModel
from freshcart.data.models.product_suggestion import ProductSuggestionModel
from freshcart.data.models.society_request import SocietyRequestModel

__all__ = [
    "UserModel",
    "CategoryModel",
    "ProductModel",
    "OrderModel",
    "OrderItemModel",
    "PaymentModel",
    "ContactSubmissionModel",
    "ProductSuggestionModel",
    "SocietyRequestModel",
]
