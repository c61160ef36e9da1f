"""
샘플 카탈로그 데이터 입력 (카탈로그가 비어 있을 때만)
"""
from decimal import Decimal

import structlog
from sqlalchemy.orm import Session

from storefront.models import Category, Product, ProductImage

logger = structlog.get_logger()

SAMPLE_CATEGORIES = [
    ("Electronics", "Electronic devices and gadgets", "electronics"),
    ("Clothing", "Fashion and apparel", "clothing"),
    ("Home & Garden", "Home improvement and gardening", "home-garden"),
    ("Sports & Outdoors", "Sports equipment and outdoor gear", "sports-outdoors"),
    ("Books", "Books and literature", "books"),
    ("Toys & Games", "Toys and games for all ages", "toys-games"),
]

# (name, description, short_description, sku, price, compare_price, category slug, inventory, featured, image)
SAMPLE_PRODUCTS = [
    ("Wireless Bluetooth Headphones", "Premium quality wireless headphones with noise cancellation and 30-hour battery life.",
     "Premium wireless headphones with noise cancellation", "WBH-001", "199.99", "249.99", "electronics", 50, True,
     "https://images.pexels.com/photos/3394650/pexels-photo-3394650.jpeg"),
    ("Smart Fitness Watch", "Advanced fitness tracking with heart rate monitor, GPS, and smartphone integration.",
     "Advanced fitness tracking watch", "SFW-002", "299.99", "349.99", "electronics", 30, True,
     "https://images.pexels.com/photos/437037/pexels-photo-437037.jpeg"),
    ("Organic Cotton T-Shirt", "Comfortable 100% organic cotton t-shirt available in multiple colors.",
     "100% organic cotton comfort tee", "OCT-003", "29.99", "39.99", "clothing", 100, False,
     "https://images.pexels.com/photos/996329/pexels-photo-996329.jpeg"),
    ("Ergonomic Office Chair", "Adjustable office chair with lumbar support and breathable mesh back.",
     "Ergonomic chair with lumbar support", "EOC-004", "249.99", "299.99", "home-garden", 25, True,
     "https://images.pexels.com/photos/6443060/pexels-photo-6443060.jpeg"),
    ("Professional Chef Knife Set", "High-quality stainless steel knife set with wooden block holder.",
     "Professional grade knife set", "CKS-005", "149.99", "199.99", "home-garden", 40, False,
     "https://images.pexels.com/photos/2983101/pexels-photo-2983101.jpeg"),
    ("Yoga Mat Premium", "Non-slip yoga mat with superior grip and extra cushioning for comfort.",
     "Premium non-slip yoga mat", "YMP-006", "79.99", "99.99", "sports-outdoors", 60, False,
     "https://images.pexels.com/photos/3822622/pexels-photo-3822622.jpeg"),
    ("Hiking Backpack 40L", "Durable hiking backpack with multiple compartments and rain cover.",
     "Durable 40L hiking backpack", "HBP-007", "129.99", "159.99", "sports-outdoors", 35, True,
     "https://images.pexels.com/photos/1365425/pexels-photo-1365425.jpeg"),
    ("Mystery Novel Collection", "Bestselling mystery novel series - complete collection of 5 books.",
     "Complete mystery novel series", "MNC-008", "49.99", "74.99", "books", 80, False,
     "https://images.pexels.com/photos/1370295/pexels-photo-1370295.jpeg"),
    ("Educational Building Blocks", "Creative building blocks set for developing problem-solving skills.",
     "Educational STEM building blocks", "EBB-009", "39.99", "49.99", "toys-games", 75, True,
     "https://images.pexels.com/photos/298825/pexels-photo-298825.jpeg"),
    ("Wireless Phone Charger", "Fast wireless charging pad compatible with all Qi-enabled devices.",
     "Fast wireless charging pad", "WPC-010", "34.99", "49.99", "electronics", 90, False,
     "https://images.pexels.com/photos/4792720/pexels-photo-4792720.jpeg"),
    ("Denim Jacket Classic", "Classic denim jacket made from high-quality cotton denim.",
     "Classic cotton denim jacket", "DJC-011", "89.99", "119.99", "clothing", 45, False,
     "https://images.pexels.com/photos/1082529/pexels-photo-1082529.jpeg"),
    ("Smart Home Security Camera", "HD security camera with night vision, motion detection, and mobile alerts.",
     "Smart HD security camera", "SHSC-012", "179.99", "219.99", "electronics", 55, True,
     "https://images.pexels.com/photos/430208/pexels-photo-430208.jpeg"),
]


def seed_catalog(db: Session) -> bool:
    """카테고리/상품이 없으면 샘플 데이터 입력. 입력했으면 True"""
    if db.query(Category).first() is not None or db.query(Product).first() is not None:
        return False

    categories = {}
    for sort_order, (name, description, slug) in enumerate(SAMPLE_CATEGORIES):
        category = Category(name=name, description=description, slug=slug, sort_order=sort_order)
        db.add(category)
        categories[slug] = category
    db.flush()

    for (name, description, short_description, sku, price, compare_price,
         slug, inventory, featured, image_url) in SAMPLE_PRODUCTS:
        product = Product(
            name=name,
            description=description,
            short_description=short_description,
            sku=sku,
            price=Decimal(price),
            compare_price=Decimal(compare_price),
            category_id=categories[slug].id,
            inventory_quantity=inventory,
            is_featured=featured,
        )
        product.images.append(ProductImage(image_url=image_url, alt_text=name, is_primary=True))
        db.add(product)

    db.commit()
    logger.info("Sample catalog seeded", categories=len(SAMPLE_CATEGORIES), products=len(SAMPLE_PRODUCTS))
    return True
