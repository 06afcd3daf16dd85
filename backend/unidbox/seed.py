"""
Sample storefront data

Loads the storefront catalog, two sample orders and a delivery order and
invoice for each order. Used by scripts/seed_data.py and the test suite.

Author: TM3
Date: 2026-01-29
"""
import json
import logging
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.orm import Session

from unidbox.models import DeliveryOrder, Invoice, Order, OrderItem, Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "sku": "CB-001",
        "name": "Heavy Duty Cable Box - Large",
        "description": "Professional cable management box for organizing multiple cables and power strips. Ideal for office and home use.",
        "category": "Cable Management",
        "price": 2990,
        "stock_quantity": 45,
        "image_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
        "specifications": {
            "dimensions": "40cm x 15cm x 13cm",
            "material": "High-quality ABS plastic",
            "color": "White",
            "weight": "800g",
            "capacity": "Holds up to 6 power strips",
        },
    },
    {
        "sku": "CB-002",
        "name": "Compact Cable Organizer",
        "description": "Space-saving cable organizer perfect for desks and small spaces. Keeps your workspace tidy and professional.",
        "category": "Cable Management",
        "price": 1590,
        "stock_quantity": 0,
        "image_url": "https://images.unsplash.com/photo-1625948515291-69613efd103f?w=800",
        "specifications": {
            "dimensions": "25cm x 10cm x 8cm",
            "material": "Durable plastic",
            "color": "Black",
            "weight": "350g",
            "capacity": "Holds up to 3 power strips",
        },
    },
    {
        "sku": "CT-001",
        "name": "Premium Cable Ties - 100 Pack",
        "description": "Professional-grade cable ties for secure cable management. Reusable and adjustable design.",
        "category": "Cable Accessories",
        "price": 890,
        "stock_quantity": 150,
        "image_url": "https://images.unsplash.com/photo-1591290619762-c588f7e0f12d?w=800",
        "specifications": {
            "quantity": "100 pieces",
            "material": "Nylon",
            "colors": "Assorted (Black, White, Blue)",
            "length": "20cm",
            "maxDiameter": "5cm",
        },
    },
    {
        "sku": "CM-001",
        "name": "Under Desk Cable Tray",
        "description": "Spacious cable management tray that mounts under any desk. Keeps cables organized and out of sight.",
        "category": "Cable Management",
        "price": 3490,
        "stock_quantity": 28,
        "image_url": "https://images.unsplash.com/photo-1595246140625-573b715d11dc?w=800",
        "specifications": {
            "dimensions": "90cm x 14cm x 10cm",
            "material": "Metal mesh",
            "color": "Silver",
            "weight": "1.2kg",
            "mounting": "Clamp or screw mount",
        },
    },
    {
        "sku": "PS-001",
        "name": "6-Outlet Power Strip with Surge Protection",
        "description": "Premium power strip with built-in surge protection. Features 6 outlets and 2 USB ports.",
        "category": "Power Solutions",
        "price": 4290,
        "stock_quantity": 62,
        "image_url": "https://images.unsplash.com/photo-1601524909162-ae8725290836?w=800",
        "specifications": {
            "outlets": "6 AC outlets",
            "usbPorts": "2 USB-A ports (2.4A each)",
            "surgeProtection": "900 Joules",
            "cableLength": "2 meters",
            "safety": "Overload protection, fireproof casing",
        },
    },
    {
        "sku": "CM-002",
        "name": "Cable Sleeve - Flexible Wrap",
        "description": "Flexible cable sleeve for bundling and protecting multiple cables. Easy to install and remove.",
        "category": "Cable Accessories",
        "price": 1290,
        "stock_quantity": 85,
        "image_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
        "specifications": {
            "length": "3 meters",
            "diameter": "2.5cm expandable",
            "material": "Polyester braided",
            "color": "Black",
            "features": "Expandable, flame retardant",
        },
    },
    {
        "sku": "WM-001",
        "name": "Wall Mount Cable Clips - 50 Pack",
        "description": "Adhesive cable clips for routing cables along walls and surfaces. No drilling required.",
        "category": "Cable Accessories",
        "price": 690,
        "stock_quantity": 200,
        "image_url": "https://images.unsplash.com/photo-1621905252507-b35492cc74b4?w=800",
        "specifications": {
            "quantity": "50 pieces",
            "material": "ABS plastic with 3M adhesive",
            "color": "White",
            "cableSize": "Fits cables up to 8mm diameter",
            "surface": "Works on smooth surfaces",
        },
    },
    {
        "sku": "PS-002",
        "name": "Smart Power Strip with Timer",
        "description": "Intelligent power strip with programmable timer and individual outlet control. Energy-saving design.",
        "category": "Power Solutions",
        "price": 5990,
        "stock_quantity": 15,
        "image_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
        "specifications": {
            "outlets": "4 smart outlets, 4 standard outlets",
            "features": "WiFi control, timer, scheduling",
            "app": "iOS and Android compatible",
            "power": "Max 2500W",
            "warranty": "2 years",
        },
    },
]

# Items reference products by SKU
SAMPLE_ORDERS = [
    {
        "order_number": "ORD-2026-0042",
        "customer_name": "Sarah Tan",
        "customer_email": "sarah.tan@example.com",
        "customer_phone": "+65 9123 4567",
        "delivery_address": "123 Orchard Road, #05-67, Singapore 238858",
        "status": "ready_to_dispatch",
        "payment_status": "paid",
        "subtotal": 7870,
        "delivery_fee": 500,
        "tax": 590,
        "total": 8960,
        "estimated_delivery_date": datetime(2026, 2, 5, tzinfo=timezone.utc),
        "courier_service": "SingPost",
        "tracking_number": "SP123456789SG",
        "delivery_instructions": "Please call before delivery",
        "items": [("CB-001", 2), ("CT-001", 1), ("WM-001", 1)],
    },
    {
        "order_number": "ORD-2026-0043",
        "customer_name": "John Lim",
        "customer_email": "john.lim@example.com",
        "customer_phone": "+65 8765 4321",
        "delivery_address": "456 Clementi Avenue 3, #12-34, Singapore 129876",
        "status": "processing",
        "payment_status": "paid",
        "subtotal": 12470,
        "delivery_fee": 500,
        "tax": 920,
        "total": 13890,
        "estimated_delivery_date": datetime(2026, 2, 8, tzinfo=timezone.utc),
        "courier_service": "NinjaVan",
        "tracking_number": None,
        "delivery_instructions": "Leave at door if no one is home",
        "items": [("CM-001", 2), ("PS-001", 1), ("CM-002", 1)],
    },
]


def seed_database(db: Session) -> None:
    """
    Insert the sample catalog and orders

    Skips loading when products already exist, so running it twice is safe.
    """
    if db.query(Product).count() > 0:
        logger.info("Products already present, skipping seed")
        return

    products_by_sku = {}
    for data in SAMPLE_PRODUCTS:
        fields = dict(data)
        fields["specifications"] = json.dumps(fields["specifications"])
        product = Product(**fields)
        db.add(product)
        products_by_sku[product.sku] = product
    db.flush()
    logger.info(f"Inserted {len(products_by_sku)} products")

    for data in SAMPLE_ORDERS:
        fields = dict(data)
        item_specs = fields.pop("items")
        order = Order(**fields)

        invoice_lines = []
        for sku, quantity in item_specs:
            product = products_by_sku[sku]
            subtotal = product.price * quantity
            order.items.append(OrderItem(
                product_id=product.id,
                product_name=product.name,
                product_sku=product.sku,
                quantity=quantity,
                unit_price=product.price,
                subtotal=subtotal,
            ))
            invoice_lines.append({
                "name": product.name,
                "sku": product.sku,
                "quantity": quantity,
                "unit_price": product.price,
                "total": subtotal,
            })

        invoice_subtotal = sum(line["total"] for line in invoice_lines)
        suffix = order.order_number.replace("ORD-", "")
        order.delivery_orders.append(DeliveryOrder(
            do_number=f"DO-{suffix}",
            status="generated",
        ))
        order.invoices.append(Invoice(
            invoice_number=f"INV-{suffix}",
            items=invoice_lines,
            subtotal=invoice_subtotal,
            tax=order.tax,
            discount=0,
            total=invoice_subtotal + order.tax,
            status="paid" if order.payment_status == "paid" else "sent",
            due_date=date(2026, 1, 31) + timedelta(days=30),
            payment_terms="Net 30",
        ))
        db.add(order)
        logger.info(f"Inserted order {order.order_number} with {len(item_specs)} items")

    db.commit()
