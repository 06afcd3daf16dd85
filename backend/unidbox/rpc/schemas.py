"""
Procedure input schemas

Scalars are strict: numbers must be real integers (booleans and numeric
strings are rejected) and strings must be real strings. Object inputs use
camelCase keys on the wire.

Row ids are bounded to the signed 32-bit range of the INTEGER id columns,
so an out-of-range id is invalid input rather than a driver error.
"""
from typing import Annotated, List, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictStr
from pydantic.alias_generators import to_camel

from unidbox.domain.order import DeliveryOrderStatus, InvoiceStatus, OrderStatus

ROW_ID_MIN = -(2 ** 31)
ROW_ID_MAX = 2 ** 31 - 1
MAX_CART_QUANTITY = 9999

RowId = Annotated[int, Field(strict=True, ge=ROW_ID_MIN, le=ROW_ID_MAX)]
ProductId = RowId
OrderId = RowId
OrderNumber = StrictStr
Sku = StrictStr
Category = StrictStr
SearchTerm = StrictStr
CatalogItemId = StrictStr
CatalogItemIds = List[StrictStr]


class StrictInput(BaseModel):
    """Base class for object inputs"""

    model_config = ConfigDict(strict=True, alias_generator=to_camel, populate_by_name=True)


class ChatMessageInput(StrictInput):
    role: Literal["user", "assistant"]
    content: str


class SendMessageInput(StrictInput):
    messages: List[ChatMessageInput]
    user_query: str


class TranscriptMessage(StrictInput):
    role: Literal["user", "assistant"]
    content: str
    timestamp: str


class ExportToEmailInput(StrictInput):
    email: EmailStr
    messages: List[TranscriptMessage]


class UpdateOrderStatusInput(StrictInput):
    order_id: RowId
    status: OrderStatus


class UpdateInvoiceStatusInput(StrictInput):
    invoice_id: RowId
    status: InvoiceStatus


class UpdateDeliveryOrderStatusInput(StrictInput):
    do_id: RowId
    status: DeliveryOrderStatus


class DealerInput(StrictInput):
    dealer_id: str


# ============================================================================
# Dealer cart
# ============================================================================

class AddToCartInput(StrictInput):
    sku: str
    quantity: int = Field(1, ge=1, le=MAX_CART_QUANTITY)


class UpdateCartQuantityInput(StrictInput):
    """quantity 0 removes the line"""

    item_id: RowId
    quantity: int = Field(..., ge=0, le=MAX_CART_QUANTITY)


class CartItemInput(StrictInput):
    item_id: RowId
