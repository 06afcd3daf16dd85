"""
Chat assistant models
"""
from typing import List, Literal, Optional

from unidbox.domain.base import DomainModel

ActionVariant = Literal["default", "secondary", "outline"]


class ChatMessage(DomainModel):
    """A single message in the conversation history"""
    role: Literal["user", "assistant"]
    content: str


class ProductRecommendation(DomainModel):
    id: int
    name: str
    price: int
    image_url: Optional[str] = None
    stock_quantity: int
    sku: str
    reason: str


class SuggestedAction(DomainModel):
    id: str
    label: str
    action: str
    variant: ActionVariant = "outline"


class ChatResponse(DomainModel):
    """Assistant reply; empty product/action lists are sent as None"""
    message: str
    products: Optional[List[ProductRecommendation]] = None
    suggested_actions: Optional[List[SuggestedAction]] = None
