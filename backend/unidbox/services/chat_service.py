"""
Claude Chat Service for the UNiDBox storefront

This module integrates with Claude AI (Anthropic) to answer customer
questions with the product catalog as context.

Features:
- System prompt with UNiDBox company information
- Current product catalog injected into the system prompt
- Structured answer through a forced tool call (message, recommended
  products, suggested actions)
- Conversation history support

Author: TM3
Date: 2026-01-30
"""
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import anthropic

from unidbox.core.config import settings
from unidbox.domain.chat import ChatMessage, ChatResponse, ProductRecommendation, SuggestedAction
from unidbox.domain.product import Product

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURATION
# ============================================================================

MAX_TOKENS = 2048
MAX_RECOMMENDED_PRODUCTS = 3
MAX_SUGGESTED_ACTIONS = 3
MAX_ALTERNATIVES = 3

SYSTEM_PROMPT = """You are a helpful AI assistant for UNiDBox Hardware, a wholesale hardware and home essentials supplier in Singapore.

Your role is to:
1. Help customers find the right products for their needs
2. Provide accurate product information including pricing and availability
3. Suggest alternatives when products are out of stock
4. Answer questions about orders, delivery, and company policies
5. Be friendly, professional, and concise

When recommending products:
- Always check stock availability
- Suggest alternatives if items are out of stock
- Explain why a product is a good fit for the customer's needs
- Provide clear pricing information

Available product categories:
- Cable Management (cable boxes, trays, organizers)
- Power Solutions (power strips, surge protectors)
- Cable Accessories (ties, clips, sleeves)

Company information:
- Contact: +65 9456 6653
- Email: info@unidbox.com
- Location: 469 MacPherson Rd, Singapore
- Hours: Mon-Fri 9am-6pm, Sat 9am-3pm, Sun Closed

Format your responses in a conversational, helpful tone. When suggesting products, mention their key features and benefits.

Always answer by calling the chat_response tool."""

# ============================================================================
# RESPONSE TOOL
# ============================================================================

RESPONSE_TOOL = {
    "name": "chat_response",
    "description": "Send the reply to the customer together with product recommendations and suggested actions.",
    "input_schema": {
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "The assistant's response message to the user"
            },
            "recommendedProductIds": {
                "type": "array",
                "description": "Array of product IDs to recommend (max 3)",
                "items": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "reason": {"type": "string"}
                    },
                    "required": ["id", "reason"]
                }
            },
            "suggestedActions": {
                "type": "array",
                "description": "Array of suggested actions for the user",
                "items": {
                    "type": "object",
                    "properties": {
                        "label": {"type": "string"},
                        "action": {"type": "string"},
                        "variant": {
                            "type": "string",
                            "enum": ["default", "secondary", "outline"]
                        }
                    },
                    "required": ["label", "action"]
                }
            }
        },
        "required": ["message", "recommendedProductIds", "suggestedActions"]
    }
}


def build_catalog_context(catalog: Sequence[Product]) -> str:
    """Catalog summary appended to the system prompt"""
    context = [
        {
            "id": p.id,
            "name": p.name,
            "sku": p.sku,
            "category": p.category,
            "price": p.price_display,
            "stockQuantity": p.stock_quantity,
            "description": p.description,
            "inStock": p.in_stock,
        }
        for p in catalog
    ]
    return f"{SYSTEM_PROMPT}\n\nCurrent Product Catalog:\n{json.dumps(context, indent=2)}"


def limit_history(history: Sequence[ChatMessage], max_messages: int) -> List[ChatMessage]:
    """Keep only the most recent max_messages entries"""
    if len(history) > max_messages:
        logger.info(f"History trimmed: {len(history)} -> {max_messages} messages")
        return list(history[-max_messages:])
    return list(history)


def _to_recommendation(product: Product, reason: str) -> ProductRecommendation:
    return ProductRecommendation(
        id=product.id,
        name=product.name,
        price=product.price,
        image_url=product.image_url,
        stock_quantity=product.stock_quantity,
        sku=product.sku,
        reason=reason,
    )


def build_chat_response(answer: Dict[str, Any], catalog: Sequence[Product]) -> ChatResponse:
    """
    Turn the model's structured answer into a ChatResponse

    Recommended ids are resolved against the catalog (first three only,
    unknown ids dropped). Stock-aware actions are appended while fewer than
    three actions exist. Empty lists are returned as None.
    """
    by_id = {p.id: p for p in catalog}

    products: List[ProductRecommendation] = []
    for rec in (answer.get("recommendedProductIds") or [])[:MAX_RECOMMENDED_PRODUCTS]:
        product = by_id.get(rec.get("id"))
        if product:
            products.append(_to_recommendation(product, rec.get("reason", "")))

    actions: List[SuggestedAction] = []
    for index, action in enumerate(answer.get("suggestedActions") or []):
        actions.append(SuggestedAction(
            id=f"action-{index}",
            label=action["label"],
            action=action["action"],
            variant=action.get("variant") or "outline",
        ))

    if products:
        has_in_stock = any(p.stock_quantity > 0 for p in products)
        has_out_of_stock = any(p.stock_quantity == 0 for p in products)

        if has_in_stock and len(actions) < MAX_SUGGESTED_ACTIONS:
            actions.append(SuggestedAction(
                id="action-add-to-cart",
                label="Add to Cart",
                action="add_to_cart",
                variant="default",
            ))

        if has_out_of_stock and len(actions) < MAX_SUGGESTED_ACTIONS:
            actions.append(SuggestedAction(
                id="action-notify-restock",
                label="Notify When Back in Stock",
                action="notify_restock",
                variant="outline",
            ))

    return ChatResponse(
        message=answer.get("message", ""),
        products=products or None,
        suggested_actions=actions or None,
    )


# ============================================================================
# MAIN SERVICE CLASS
# ============================================================================

class ChatService:
    """
    Service for answering storefront questions using Claude AI.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize the Claude client"""
        api_key = api_key or settings.ANTHROPIC_API_KEY
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")

        self.client = anthropic.Anthropic(api_key=api_key)
        self.model = model or settings.CLAUDE_MODEL
        logger.info(f"ChatService initialized with model: {self.model}")

    def process_chat(
        self,
        catalog: Sequence[Product],
        messages: Sequence[ChatMessage],
        user_query: str,
    ) -> ChatResponse:
        """
        Answer a customer question.

        Args:
            catalog: Current storefront products
            messages: Prior conversation
            user_query: The new question

        Returns:
            ChatResponse with the reply, up to three products and suggested actions

        Raises:
            RuntimeError: if the model does not return a structured answer
        """
        history = limit_history(messages, settings.MAX_HISTORY_MESSAGES)
        api_messages = [{"role": m.role, "content": m.content} for m in history]
        api_messages.append({"role": "user", "content": user_query})

        logger.info(f"Processing chat query: {user_query[:100]}... ({len(api_messages)} messages)")

        response = self.client.messages.create(
            model=self.model,
            max_tokens=MAX_TOKENS,
            system=build_catalog_context(catalog),
            tools=[RESPONSE_TOOL],
            tool_choice={"type": "tool", "name": RESPONSE_TOOL["name"]},
            messages=api_messages,
        )

        answer = None
        for block in response.content:
            if getattr(block, "type", None) == "tool_use" and block.name == RESPONSE_TOOL["name"]:
                answer = block.input
                break

        if not answer:
            raise RuntimeError("No structured response from model")

        logger.info(
            f"Chat completed. Tokens: {response.usage.input_tokens}/{response.usage.output_tokens}"
        )
        return build_chat_response(answer, catalog)


def find_alternative_products(product_repo, product_id: int) -> List[ProductRecommendation]:
    """
    In-stock products from the same category as product_id

    Args:
        product_repo: ProductRepository
        product_id: Product to find alternatives for

    Returns:
        Up to three recommendations, empty if the product does not exist
    """
    product = product_repo.find_by_id(product_id)
    if not product:
        return []

    reason = f"Alternative {product.category} product with similar features"
    alternatives = [
        p for p in product_repo.find_all()
        if p.id != product_id and p.category == product.category and p.stock_quantity > 0
    ]
    return [_to_recommendation(p, reason) for p in alternatives[:MAX_ALTERNATIVES]]


# ============================================================================
# SINGLETON INSTANCE
# ============================================================================

_service_instance: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """
    Get the singleton chat service instance.

    Returns:
        ChatService instance

    Raises:
        ValueError: if no Anthropic API key is configured
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = ChatService()
    return _service_instance
