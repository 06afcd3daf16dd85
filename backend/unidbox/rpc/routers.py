"""
Application router - every procedure exposed over /api/v1/rpc

Each handler forwards its validated input to one collaborator and returns
the result unchanged. Lookups that find nothing return None or an empty
list; mutations report {"success": bool}.

Author: TM3
Date: 2026-01-30
"""
import logging
import uuid

from unidbox.core.auth import COOKIE_NAME, get_session_cookie_options
from unidbox.domain.chat import ChatMessage
from unidbox.repositories.cart_repository import CartRepository
from unidbox.repositories.chat_transcript_repository import ChatTranscriptRepository
from unidbox.repositories.delivery_order_repository import DeliveryOrderRepository
from unidbox.repositories.invoice_repository import InvoiceRepository
from unidbox.repositories.order_repository import OrderRepository
from unidbox.repositories.product_repository import ProductRepository
from unidbox.repositories.reference_repository import get_reference_data
from unidbox.rpc.procedure import AccessLevel, AppRouter, Router
from unidbox.rpc.schemas import (
    AddToCartInput,
    CartItemInput,
    CatalogItemId,
    CatalogItemIds,
    Category,
    DealerInput,
    ExportToEmailInput,
    OrderId,
    OrderNumber,
    ProductId,
    SearchTerm,
    Sku,
    SendMessageInput,
    UpdateCartQuantityInput,
    UpdateDeliveryOrderStatusInput,
    UpdateInvoiceStatusInput,
    UpdateOrderStatusInput,
)
from unidbox.services.cart_service import get_discount_rate, price_cart
from unidbox.services.chat_service import find_alternative_products
from unidbox.services.recommendation_service import get_recommendations

logger = logging.getLogger(__name__)

AUTHENTICATED = AccessLevel.AUTHENTICATED
ADMIN = AccessLevel.ADMIN


# ============================================================================
# system / auth
# ============================================================================

system = Router()


@system.query("health")
def health(ctx, _):
    return {"ok": True}


auth = Router()


@auth.query("me")
def me(ctx, _):
    return ctx.user


@auth.mutation("logout")
def logout(ctx, _):
    if ctx.request is not None and ctx.response is not None:
        ctx.response.delete_cookie(COOKIE_NAME, **get_session_cookie_options(ctx.request))
    return {"success": True}


# ============================================================================
# chat
# ============================================================================

chat = Router()


@chat.mutation("sendMessage", input=SendMessageInput)
def send_message(ctx, data: SendMessageInput):
    service = ctx.chat_service()
    catalog = ProductRepository(ctx.db).find_all()
    history = [ChatMessage(role=m.role, content=m.content) for m in data.messages]
    return service.process_chat(catalog, history, data.user_query)


@chat.query("getAlternatives", input=ProductId)
def get_alternatives(ctx, product_id: int):
    return find_alternative_products(ProductRepository(ctx.db), product_id)


@chat.mutation("exportToEmail", input=ExportToEmailInput)
def export_to_email(ctx, data: ExportToEmailInput):
    # TODO: hand the saved transcript to a mailer once SMTP settings are added to Settings
    transcript = ChatTranscriptRepository(ctx.db).save(
        session_id=uuid.uuid4().hex,
        messages=[m.model_dump() for m in data.messages],
        exported_to_email=data.email,
        user_id=ctx.user.open_id if ctx.user else None,
    )
    logger.info(f"Chat transcript {transcript.id} queued for {data.email} ({len(data.messages)} messages)")
    return {"success": True, "message": "Chat transcript will be sent to your email shortly"}


# ============================================================================
# orders / products
# ============================================================================

orders = Router()


@orders.query("getByNumber", input=OrderNumber)
def get_order_by_number(ctx, order_number: str):
    return OrderRepository(ctx.db).find_by_number(order_number)


@orders.query("getItems", input=OrderId)
def get_order_items(ctx, order_id: int):
    return OrderRepository(ctx.db).find_items(order_id)


@orders.mutation("updateStatus", input=UpdateOrderStatusInput, access=ADMIN)
def update_order_status(ctx, data: UpdateOrderStatusInput):
    return {"success": OrderRepository(ctx.db).update_status(data.order_id, data.status)}


products = Router()


@products.query("list")
def list_products(ctx, _):
    return ProductRepository(ctx.db).find_all()


@products.query("getById", input=ProductId)
def get_product_by_id(ctx, product_id: int):
    return ProductRepository(ctx.db).find_by_id(product_id)


@products.query("getBySku", input=Sku)
def get_product_by_sku(ctx, sku: str):
    return ProductRepository(ctx.db).find_by_sku(sku)


@products.query("byCategory", input=Category)
def products_by_category(ctx, category: str):
    return ProductRepository(ctx.db).find_by_category(category)


@products.query("search", input=SearchTerm)
def search_products(ctx, term: str):
    return ProductRepository(ctx.db).search(term)


# ============================================================================
# invoices / delivery orders (admin console)
# ============================================================================

invoices = Router()


@invoices.query("listAll", access=ADMIN)
def list_invoices(ctx, _):
    return InvoiceRepository(ctx.db).find_all()


@invoices.mutation("updateStatus", input=UpdateInvoiceStatusInput, access=ADMIN)
def update_invoice_status(ctx, data: UpdateInvoiceStatusInput):
    return {"success": InvoiceRepository(ctx.db).update_status(data.invoice_id, data.status)}


delivery_orders = Router()


@delivery_orders.query("listAll", access=ADMIN)
def list_delivery_orders(ctx, _):
    return DeliveryOrderRepository(ctx.db).find_all()


@delivery_orders.query("getByOrderId", input=OrderId)
def get_delivery_orders_for_order(ctx, order_id: int):
    return DeliveryOrderRepository(ctx.db).find_by_order_id(order_id)


@delivery_orders.mutation("updateStatus", input=UpdateDeliveryOrderStatusInput, access=ADMIN)
def update_delivery_order_status(ctx, data: UpdateDeliveryOrderStatusInput):
    return {"success": DeliveryOrderRepository(ctx.db).update_status(data.do_id, data.status)}


# ============================================================================
# dealer portal (reference data)
# ============================================================================

dealers = Router()


@dealers.query("list", access=ADMIN)
def list_dealers(ctx, _):
    return list(get_reference_data().dealers)


@dealers.query("get", input=DealerInput, access=ADMIN)
def get_dealer(ctx, data: DealerInput):
    return get_reference_data().get_dealer(data.dealer_id)


@dealers.query("orders", input=DealerInput, access=AUTHENTICATED)
def dealer_orders(ctx, data: DealerInput):
    return list(get_reference_data().get_dealer_orders(data.dealer_id))


@dealers.query("predictiveCart", input=DealerInput, access=AUTHENTICATED)
def predictive_cart(ctx, data: DealerInput):
    return get_reference_data().get_predictive_cart(data.dealer_id)


dealer_catalog = Router()


@dealer_catalog.query("list")
def list_catalog(ctx, _):
    return list(get_reference_data().catalog)


@dealer_catalog.query("categories")
def list_categories(ctx, _):
    return list(get_reference_data().categories)


@dealer_catalog.query("getItem", input=CatalogItemId)
def get_catalog_item(ctx, product_id: str):
    return get_reference_data().get_catalog_item(product_id)


# ============================================================================
# dealer cart (lines belong to the session user)
# ============================================================================

cart = Router()


@cart.query("get", access=AUTHENTICATED)
def get_cart(ctx, _):
    reference = get_reference_data()
    items = CartRepository(ctx.db).find_by_user(ctx.user.open_id)
    return price_cart(items, reference, get_discount_rate(reference, ctx.user.dealer_id))


@cart.mutation("add", input=AddToCartInput, access=AUTHENTICATED)
def add_to_cart(ctx, data: AddToCartInput):
    catalog_item = get_reference_data().get_catalog_item_by_sku(data.sku)
    if catalog_item is None:
        return {"success": False, "message": f"Product with SKU {data.sku} not found"}
    item = CartRepository(ctx.db).add(ctx.user.open_id, catalog_item.id, data.quantity)
    return {
        "success": True,
        "item": item,
        "product": catalog_item,
        "message": f"Added {data.quantity}x {catalog_item.name} to cart",
    }


@cart.mutation("updateQuantity", input=UpdateCartQuantityInput, access=AUTHENTICATED)
def update_cart_quantity(ctx, data: UpdateCartQuantityInput):
    return {"success": CartRepository(ctx.db).update_quantity(ctx.user.open_id, data.item_id, data.quantity)}


@cart.mutation("remove", input=CartItemInput, access=AUTHENTICATED)
def remove_from_cart(ctx, data: CartItemInput):
    return {"success": CartRepository(ctx.db).remove(ctx.user.open_id, data.item_id)}


@cart.mutation("clear", access=AUTHENTICATED)
def clear_cart(ctx, _):
    removed = CartRepository(ctx.db).clear(ctx.user.open_id)
    logger.info(f"Cleared {removed} cart line(s) for {ctx.user.open_id}")
    return {"success": True}


loyalty = Router()


@loyalty.query("tiers")
def loyalty_tiers(ctx, _):
    return list(get_reference_data().loyalty_tiers)


recommendations = Router()


@recommendations.query("forCart", input=CatalogItemIds)
def recommendations_for_cart(ctx, product_ids):
    return get_recommendations(product_ids, ranker=ctx.ranker)


admin = Router()


@admin.query("metrics", access=ADMIN)
def admin_metrics(ctx, _):
    return get_reference_data().admin_metrics


@admin.query("agentActivity", access=ADMIN)
def agent_activity(ctx, _):
    return list(get_reference_data().agent_activity)


app_router = AppRouter({
    "system": system,
    "auth": auth,
    "chat": chat,
    "orders": orders,
    "products": products,
    "invoices": invoices,
    "deliveryOrders": delivery_orders,
    "dealers": dealers,
    "catalog": dealer_catalog,
    "cart": cart,
    "loyalty": loyalty,
    "recommendations": recommendations,
    "admin": admin,
})
