"""Demo products shown by the storefront when no catalog is supplied."""

SAMPLE_PRODUCTS = [
    {
        "id": "p1",
        "title": "قميص قطني أنيق",
        "price": "29.99",
        "image": "https://images.unsplash.com/photo-1520975910851-1b2f7f3b1d5c?auto=format&fit=crop&w=800&q=60",
        "description": "قميص مريح من القطن، مناسب لكل الأيام.",
    },
    {
        "id": "p2",
        "title": "حقيبة ظهر عملية",
        "price": "49.50",
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?auto=format&fit=crop&w=800&q=60",
        "description": "حقيبة ظهر واسعة ومقاومة للماء مع عدة جيوب.",
    },
    {
        "id": "p3",
        "title": "سماعات لاسلكية",
        "price": "79.00",
        "image": "https://images.unsplash.com/photo-1518444029371-0a9d1f0f0b78?auto=format&fit=crop&w=800&q=60",
        "description": "جودة صوت عالية وعمر بطارية طويل.",
    },
    {
        "id": "p4",
        "title": "سوار ذكي",
        "price": "59.90",
        "image": "https://images.unsplash.com/photo-1526178613-9d3a0c8f0f9b?auto=format&fit=crop&w=800&q=60",
        "description": "تابع نشاطك اليومي وقياس النوم.",
    },
]
