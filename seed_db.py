import os
import sys

# Add root to pythonpath
sys.path.append(os.getcwd())

from storefront.adapters.sqlite.repos import SQLiteCategoryRepo, SQLiteProductRepo
from storefront.api.deps import Settings, init_storage
from storefront.domain.entities import Category, Product

CATEGORIES = [
    Category(
        id="kurtis",
        name="Kurtis",
        image="https://images.unsplash.com/photo-1583391733958-e026b1346316?auto=format&fit=crop&q=80&w=800",
    ),
    Category(
        id="dresses",
        name="Dresses",
        image="https://images.unsplash.com/photo-1595777457583-95e059d581b8?auto=format&fit=crop&q=80&w=800",
    ),
    Category(
        id="sarees",
        name="Sarees",
        image="https://images.unsplash.com/photo-1610030469983-98e550d6193c?auto=format&fit=crop&q=80&w=800",
    ),
    Category(
        id="tops",
        name="Tops",
        image="https://images.unsplash.com/photo-1564584217132-2271feaeb3c5?auto=format&fit=crop&q=80&w=800",
    ),
]

PRODUCTS = [
    Product(
        id="1",
        name="Ethereal White Anarkali",
        description="Hand-embroidered cotton Anarkali set with delicate floral patterns.",
        price=120,
        discount_price=99,
        category="Kurtis",
        images=["https://images.unsplash.com/photo-1621819714856-11352f53448f?auto=format&fit=crop&q=80&w=800"],
        sizes=["XS", "S", "M", "L", "XL"],
        colors=["White", "Cream"],
        new_arrival=True,
        stock=15,
    ),
    Product(
        id="2",
        name="Midnight Silk Saree",
        description="Pure Banarasi silk saree in deep midnight blue with gold zari border work.",
        price=250,
        category="Sarees",
        images=["https://images.unsplash.com/photo-1610030469983-98e550d6193c?auto=format&fit=crop&q=80&w=800"],
        sizes=["Free Size"],
        colors=["Blue", "Black"],
        best_seller=True,
        stock=8,
    ),
    Product(
        id="3",
        name="Bohemian Floral Maxi",
        description="Flowy chiffon maxi dress with vintage floral prints and balloon sleeves.",
        price=85,
        discount_price=65,
        category="Dresses",
        images=["https://images.unsplash.com/photo-1572804013309-59a88b7e92f1?auto=format&fit=crop&q=80&w=800"],
        sizes=["S", "M", "L"],
        colors=["Pink", "Yellow"],
        new_arrival=True,
        stock=20,
    ),
    Product(
        id="4",
        name="Linen Crop Top",
        description="Breathable linen blend crop top with wooden buttons.",
        price=45,
        category="Tops",
        images=["https://images.unsplash.com/photo-1589810635657-232948472d98?auto=format&fit=crop&q=80&w=800"],
        sizes=["XS", "S", "M", "L"],
        colors=["Beige", "Sage"],
        best_seller=True,
        stock=30,
    ),
]


def seed():
    settings = Settings()
    print(f"Seeding to {settings.db_path}")
    init_storage(settings)

    category_repo = SQLiteCategoryRepo(settings.db_path)
    for category in CATEGORIES:
        category_repo.save(category)

    product_repo = SQLiteProductRepo(settings.db_path)
    for product in PRODUCTS:
        product_repo.save(product)

    print(f"Seeded {len(CATEGORIES)} categories and {len(PRODUCTS)} products.")


if __name__ == "__main__":
    seed()
