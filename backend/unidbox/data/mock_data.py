"""
Static dealer portal datasets

Raw records for the reference data repository. Nothing here is read
directly by procedures; see unidbox.repositories.reference_repository.
"""

CATEGORIES = [
    {"id": "cat-1", "name": "Cables & Wiring", "icon": "🔌"},
    {"id": "cat-2", "name": "Connectors", "icon": "🔗"},
    {"id": "cat-3", "name": "Tools", "icon": "🔧"},
    {"id": "cat-4", "name": "Safety Equipment", "icon": "🦺"},
    {"id": "cat-5", "name": "Lighting", "icon": "💡"},
]

# cross_sell is the association table used by recommendations
CATALOG = [
    {
        "id": "prod-001",
        "sku": "CBL-CAT6-100",
        "name": "CAT6 Ethernet Cable 100m",
        "category": "cat-1",
        "price": 89.99,
        "unit": "roll",
        "stock": 250,
        "image": "/images/hero-dealer.png",
        "description": "High-quality CAT6 ethernet cable for professional installations.",
        "cross_sell": ["prod-002", "prod-003"],
        "popular_with": ["Steady Steven", "Project Patricia"],
    },
    {
        "id": "prod-002",
        "sku": "CON-RJ45-100",
        "name": "RJ45 Connectors (100 pack)",
        "category": "cat-2",
        "price": 24.99,
        "unit": "pack",
        "stock": 500,
        "image": "/images/predictive-cart.png",
        "description": "Gold-plated RJ45 connectors for reliable connections.",
        "cross_sell": ["prod-001", "prod-004"],
        "popular_with": ["Project Patricia"],
    },
    {
        "id": "prod-003",
        "sku": "TLS-CRIMP-01",
        "name": "Professional Crimping Tool",
        "category": "cat-3",
        "price": 45.99,
        "unit": "piece",
        "stock": 75,
        "image": "/images/hero-dealer.png",
        "description": "Heavy-duty crimping tool for RJ45 and RJ11 connectors.",
        "cross_sell": ["prod-002", "prod-005"],
        "popular_with": ["Mobile Mike"],
    },
    {
        "id": "prod-004",
        "sku": "TLS-TESTER-01",
        "name": "Cable Tester Pro",
        "category": "cat-3",
        "price": 79.99,
        "unit": "piece",
        "stock": 45,
        "image": "/images/hero-admin.png",
        "description": "Professional cable tester with LCD display.",
        "cross_sell": ["prod-001", "prod-003"],
        "popular_with": ["Project Patricia", "Volume Victor"],
    },
    {
        "id": "prod-005",
        "sku": "SAF-GLOVES-L",
        "name": "Insulated Work Gloves (L)",
        "category": "cat-4",
        "price": 18.99,
        "unit": "pair",
        "stock": 200,
        "image": "/images/predictive-cart.png",
        "description": "Electrical-rated insulated work gloves, size Large.",
        "cross_sell": ["prod-006"],
        "popular_with": ["Steady Steven"],
    },
    {
        "id": "prod-006",
        "sku": "SAF-GLASSES-01",
        "name": "Safety Glasses Clear",
        "category": "cat-4",
        "price": 12.99,
        "unit": "piece",
        "stock": 300,
        "image": "/images/hero-dealer.png",
        "description": "ANSI-rated clear safety glasses with anti-fog coating.",
        "cross_sell": ["prod-005"],
        "popular_with": ["Steady Steven", "Mobile Mike"],
    },
    {
        "id": "prod-007",
        "sku": "LGT-LED-PANEL",
        "name": "LED Panel Light 60x60cm",
        "category": "cat-5",
        "price": 54.99,
        "unit": "piece",
        "stock": 120,
        "image": "/images/hero-admin.png",
        "description": "40W LED panel light, 4000K neutral white.",
        "cross_sell": ["prod-008"],
        "popular_with": ["Volume Victor"],
    },
    {
        "id": "prod-008",
        "sku": "LGT-DRIVER-40W",
        "name": "LED Driver 40W",
        "category": "cat-5",
        "price": 19.99,
        "unit": "piece",
        "stock": 180,
        "image": "/images/predictive-cart.png",
        "description": "Constant current LED driver for panel lights.",
        "cross_sell": ["prod-007"],
        "popular_with": ["Volume Victor", "Project Patricia"],
    },
]

DEALERS = [
    {
        "id": "dealer-001",
        "name": "Steven Lim",
        "company": "Steady Electrical Supplies",
        "email": "steven@steadyelectrical.com",
        "phone": "+65 9123 4567",
        "tier": "gold",
        "total_spend": 45680,
        "order_count": 48,
        "avg_order_value": 951.67,
        "last_order_date": "2026-01-15",
        "reorder_cycle": 14,
        "avatar": "SL",
        "persona": "Steady Steven",
    },
    {
        "id": "dealer-002",
        "name": "Patricia Tan",
        "company": "Project Pro Solutions",
        "email": "patricia@projectpro.sg",
        "phone": "+65 9234 5678",
        "tier": "platinum",
        "total_spend": 128450,
        "order_count": 85,
        "avg_order_value": 1511.18,
        "last_order_date": "2026-01-28",
        "reorder_cycle": 7,
        "avatar": "PT",
        "persona": "Project Patricia",
    },
    {
        "id": "dealer-003",
        "name": "Mike Chen",
        "company": "Mobile Tech Services",
        "email": "mike@mobiletech.sg",
        "phone": "+65 9345 6789",
        "tier": "silver",
        "total_spend": 12340,
        "order_count": 22,
        "avg_order_value": 560.91,
        "last_order_date": "2026-01-20",
        "reorder_cycle": 21,
        "avatar": "MC",
        "persona": "Mobile Mike",
    },
    {
        "id": "dealer-004",
        "name": "Victor Wong",
        "company": "Volume Wholesale Pte Ltd",
        "email": "victor@volumewholesale.com",
        "phone": "+65 9456 7890",
        "tier": "platinum",
        "total_spend": 285000,
        "order_count": 120,
        "avg_order_value": 2375.00,
        "last_order_date": "2026-01-30",
        "reorder_cycle": 5,
        "avatar": "VW",
        "persona": "Volume Victor",
    },
]


def _line(product_id, quantity, unit_price):
    return {"product_id": product_id, "quantity": quantity, "unit_price": unit_price}


# Newest first per dealer
DEALER_ORDERS = [
    # Steven Lim (dealer-001)
    {"id": "ORD-2026-0041", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 10, 89.99), _line("prod-002", 5, 24.99)],
     "subtotal": 1024.85, "status": "delivered", "created_at": "2026-01-15T10:30:00Z",
     "delivery_order_id": "DO-2026-0041"},
    {"id": "ORD-2026-0035", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 8, 89.99), _line("prod-005", 4, 18.99)],
     "subtotal": 795.88, "status": "delivered", "created_at": "2026-01-01T09:15:00Z",
     "delivery_order_id": "DO-2026-0035"},
    {"id": "ORD-2025-0198", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 12, 89.99), _line("prod-002", 6, 24.99), _line("prod-006", 10, 12.99)],
     "subtotal": 1359.72, "status": "delivered", "created_at": "2025-12-18T14:20:00Z",
     "delivery_order_id": "DO-2025-0198"},
    {"id": "ORD-2025-0185", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 10, 89.99)],
     "subtotal": 899.90, "status": "delivered", "created_at": "2025-12-04T11:00:00Z",
     "delivery_order_id": "DO-2025-0185"},
    {"id": "ORD-2025-0172", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 10, 89.99), _line("prod-002", 5, 24.99), _line("prod-005", 3, 18.99)],
     "subtotal": 1081.82, "status": "delivered", "created_at": "2025-11-20T08:45:00Z",
     "delivery_order_id": "DO-2025-0172"},
    {"id": "ORD-2025-0159", "dealer_id": "dealer-001",
     "items": [_line("prod-001", 8, 89.99), _line("prod-006", 5, 12.99)],
     "subtotal": 784.87, "status": "delivered", "created_at": "2025-11-06T10:30:00Z",
     "delivery_order_id": "DO-2025-0159"},
    # Patricia Tan (dealer-002)
    {"id": "ORD-2026-0042", "dealer_id": "dealer-002",
     "items": [_line("prod-007", 20, 54.99), _line("prod-008", 20, 19.99)],
     "subtotal": 1499.60, "status": "shipped", "created_at": "2026-01-28T14:15:00Z",
     "delivery_order_id": "DO-2026-0042"},
    {"id": "ORD-2026-0038", "dealer_id": "dealer-002",
     "items": [_line("prod-001", 25, 89.99), _line("prod-002", 15, 24.99), _line("prod-004", 5, 79.99)],
     "subtotal": 3024.55, "status": "delivered", "created_at": "2026-01-21T16:00:00Z",
     "delivery_order_id": "DO-2026-0038"},
    {"id": "ORD-2026-0030", "dealer_id": "dealer-002",
     "items": [_line("prod-007", 30, 54.99), _line("prod-008", 30, 19.99)],
     "subtotal": 2249.40, "status": "delivered", "created_at": "2026-01-14T09:30:00Z",
     "delivery_order_id": "DO-2026-0030"},
    {"id": "ORD-2026-0022", "dealer_id": "dealer-002",
     "items": [_line("prod-001", 20, 89.99), _line("prod-002", 10, 24.99)],
     "subtotal": 2049.70, "status": "delivered", "created_at": "2026-01-07T11:45:00Z",
     "delivery_order_id": "DO-2026-0022"},
    {"id": "ORD-2025-0195", "dealer_id": "dealer-002",
     "items": [_line("prod-004", 10, 79.99), _line("prod-003", 5, 45.99)],
     "subtotal": 1029.85, "status": "delivered", "created_at": "2025-12-31T15:20:00Z",
     "delivery_order_id": "DO-2025-0195"},
    # Mike Chen (dealer-003)
    {"id": "ORD-2026-0025", "dealer_id": "dealer-003",
     "items": [_line("prod-003", 2, 45.99), _line("prod-006", 5, 12.99)],
     "subtotal": 156.93, "status": "delivered", "created_at": "2026-01-20T13:00:00Z",
     "delivery_order_id": "DO-2026-0025"},
    {"id": "ORD-2025-0188", "dealer_id": "dealer-003",
     "items": [_line("prod-001", 3, 89.99), _line("prod-002", 2, 24.99)],
     "subtotal": 319.95, "status": "delivered", "created_at": "2025-12-28T10:30:00Z",
     "delivery_order_id": "DO-2025-0188"},
    {"id": "ORD-2025-0175", "dealer_id": "dealer-003",
     "items": [_line("prod-003", 1, 45.99), _line("prod-005", 2, 18.99), _line("prod-006", 3, 12.99)],
     "subtotal": 122.94, "status": "delivered", "created_at": "2025-12-07T14:15:00Z",
     "delivery_order_id": "DO-2025-0175"},
    {"id": "ORD-2025-0162", "dealer_id": "dealer-003",
     "items": [_line("prod-001", 2, 89.99)],
     "subtotal": 179.98, "status": "delivered", "created_at": "2025-11-16T09:00:00Z",
     "delivery_order_id": "DO-2025-0162"},
    # Victor Wong (dealer-004)
    {"id": "ORD-2026-0043", "dealer_id": "dealer-004",
     "items": [_line("prod-001", 50, 89.99), _line("prod-002", 30, 24.99)],
     "subtotal": 5249.20, "status": "processing", "created_at": "2026-01-30T09:00:00Z"},
    {"id": "ORD-2026-0040", "dealer_id": "dealer-004",
     "items": [_line("prod-007", 100, 54.99), _line("prod-008", 100, 19.99)],
     "subtotal": 7498.00, "status": "shipped", "created_at": "2026-01-25T08:30:00Z",
     "delivery_order_id": "DO-2026-0040"},
    {"id": "ORD-2026-0033", "dealer_id": "dealer-004",
     "items": [_line("prod-001", 40, 89.99), _line("prod-002", 25, 24.99), _line("prod-004", 10, 79.99)],
     "subtotal": 4924.25, "status": "delivered", "created_at": "2026-01-20T10:15:00Z",
     "delivery_order_id": "DO-2026-0033"},
    {"id": "ORD-2026-0028", "dealer_id": "dealer-004",
     "items": [_line("prod-007", 80, 54.99), _line("prod-008", 80, 19.99)],
     "subtotal": 5998.40, "status": "delivered", "created_at": "2026-01-15T14:00:00Z",
     "delivery_order_id": "DO-2026-0028"},
    {"id": "ORD-2026-0020", "dealer_id": "dealer-004",
     "items": [_line("prod-001", 60, 89.99), _line("prod-002", 40, 24.99)],
     "subtotal": 6399.00, "status": "delivered", "created_at": "2026-01-10T11:30:00Z",
     "delivery_order_id": "DO-2026-0020"},
]

PREDICTIVE_CARTS = [
    {
        "dealer_id": "dealer-001",
        "prediction": {
            "confidence": 0.92,
            "next_order_date": "2026-01-31",
            "message": "Based on your 14-day reorder cycle, you're likely due for a restock!",
        },
        "suggested_items": [
            {"product_id": "prod-001", "quantity": 10, "reason": "You order this every 2 weeks"},
            {"product_id": "prod-002", "quantity": 5, "reason": "Usually ordered with CAT6 cables"},
            {"product_id": "prod-005", "quantity": 3, "reason": "Running low based on usage pattern"},
        ],
    },
]

LOYALTY_TIERS = [
    {
        "key": "silver",
        "name": "Silver",
        "min_spend": 0,
        "benefits": ["Standard pricing", "Email support"],
        "color": "#9CA3AF",
        "discount_rate": 0.03,
    },
    {
        "key": "gold",
        "name": "Gold",
        "min_spend": 25000,
        "benefits": ["5% volume rebate", "Priority fulfillment", "Phone support"],
        "color": "#F59E0B",
        "discount_rate": 0.05,
    },
    {
        "key": "platinum",
        "name": "Platinum",
        "min_spend": 100000,
        "benefits": ["8% volume rebate", "Same-day delivery", "Dedicated account manager", "Exclusive products"],
        "color": "#8B5CF6",
        "discount_rate": 0.08,
    },
]

ADMIN_METRICS = {
    "today": {"orders": 12, "revenue": 15420.50, "avg_order_value": 1285.04, "ai_recommendations_accepted": 8},
    "week": {"orders": 67, "revenue": 89340.00, "avg_order_value": 1333.43, "ai_recommendations_accepted": 42},
    "month": {"orders": 245, "revenue": 342500.00, "avg_order_value": 1398.00, "ai_recommendations_accepted": 156},
    "ai_performance": {
        "predictive_cart_accuracy": 0.89,
        "recommendation_accept_rate": 0.23,
        "avg_aov_increase": 0.12,
    },
    "at_risk_dealers": [
        {"dealer_id": "dealer-003", "days_since_last_order": 11, "usual_cycle": 7},
    ],
}

AGENT_ACTIVITY_LOG = [
    {
        "id": "act-001",
        "agent_type": "reorder",
        "action": "Sent predictive cart notification",
        "target": "Steven Lim (Steady Electrical)",
        "timestamp": "2026-01-31T08:00:00Z",
        "status": "success",
    },
    {
        "id": "act-002",
        "agent_type": "upsell",
        "action": "Generated cross-sell recommendation",
        "target": "Patricia Tan (Project Pro)",
        "timestamp": "2026-01-31T07:45:00Z",
        "status": "success",
    },
    {
        "id": "act-003",
        "agent_type": "loyalty",
        "action": "Tier upgrade notification sent",
        "target": "Mike Chen → Gold tier",
        "timestamp": "2026-01-30T16:30:00Z",
        "status": "pending",
    },
    {
        "id": "act-004",
        "agent_type": "monitoring",
        "action": "At-risk dealer alert triggered",
        "target": "Mike Chen (11 days since last order)",
        "timestamp": "2026-01-31T06:00:00Z",
        "status": "success",
    },
    {
        "id": "act-005",
        "agent_type": "content",
        "action": "Marketing content generated",
        "target": "LED Panel Light promotion",
        "timestamp": "2026-01-30T14:00:00Z",
        "status": "success",
    },
]
