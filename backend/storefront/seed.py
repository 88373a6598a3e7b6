#!/usr/bin/env python3
"""
Replaces the `products` collection with the sample catalog.

Usage: python -m storefront.seed
"""
import logging
import sys

from storefront.config import get_db
from storefront.core.logging import setup_logging
from storefront.repositories import products as catalog
from storefront.schemas.product import Product

logger = logging.getLogger("storefront.seed")

SAMPLE_PRODUCTS = [
    Product(
        id="dell-xps-13",
        name="Laptop - Dell XPS 13",
        description="High-performance ultrabook with 11th Gen Intel Core i7 processor, 16GB RAM, 512GB SSD.",
        price=85000,
        category="Electronics",
        image="https://images.unsplash.com/photo-1593642632823-8f785ba67e45?w=500",
        stock=15,
        ratings=4.5,
        num_reviews=120,
    ),
    Product(
        id="logitech-mx-master-3",
        name="Wireless Mouse - Logitech MX Master 3",
        description="Ergonomic wireless mouse with advanced tracking, customizable buttons, and long battery life.",
        price=8500,
        category="Electronics",
        image="https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=500",
        stock=50,
        ratings=4.7,
        num_reviews=85,
    ),
    Product(
        id="keychron-k2",
        name="Mechanical Keyboard - Keychron K2",
        description="Compact 75% wireless mechanical keyboard with RGB backlight and hot-swappable switches.",
        price=7500,
        category="Electronics",
        image="https://images.unsplash.com/photo-1587829741301-dc798b83add3?w=500",
        stock=30,
        ratings=4.6,
        num_reviews=64,
    ),
    Product(
        id="cotton-tshirt-men",
        name="Men's Cotton T-Shirt",
        description="Soft, breathable 100% cotton crew-neck t-shirt for everyday wear.",
        price=799,
        category="Clothing",
        image="https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=500",
        stock=100,
        ratings=4.2,
        num_reviews=210,
    ),
    Product(
        id="nike-air-zoom",
        name="Running Shoes - Nike Air Zoom",
        description="Lightweight running shoes with responsive cushioning.",
        price=9995,
        category="Sports",
        image="https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=500",
        stock=45,
        ratings=4.6,
        num_reviews=150,
    ),
    Product(
        id="french-press",
        name="Coffee Maker - French Press",
        description="Borosilicate glass French press with stainless steel filter.",
        price=1299,
        category="Home & Garden",
        image="https://images.unsplash.com/photo-1495474472287-4d71bcdd2085?w=500",
        stock=35,
        ratings=4.4,
        num_reviews=58,
    ),
    Product(
        id="atomic-habits",
        name="Book - Atomic Habits",
        description="An easy and proven way to build good habits and break bad ones.",
        price=499,
        category="Books",
        image="https://images.unsplash.com/photo-1544947950-fa07a98d237f?w=500",
        stock=150,
        ratings=4.8,
        num_reviews=320,
    ),
    Product(
        id="travel-backpack",
        name="Backpack - Travel & Laptop",
        description="Water-resistant travel backpack with padded laptop compartment.",
        price=2499,
        category="Other",
        image="https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=500",
        stock=40,
        ratings=4.3,
        num_reviews=77,
    ),
]


def seed(db) -> int:
    count = catalog.replace_all(db, SAMPLE_PRODUCTS)
    logger.info("Seeded %d products", count)
    return count


if __name__ == "__main__":
    setup_logging()
    try:
        seed(get_db())
    except Exception:
        logger.exception("Seeding failed")
        sys.exit(1)
