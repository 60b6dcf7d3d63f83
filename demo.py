#!/usr/bin/env python
import os

from catalogsdk.pycatalog import CatalogClient


def main():
    c = CatalogClient(
        base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"),
        token=os.getenv("CATALOG_TOKEN", "demo-token"),
        api_key=os.getenv("CATALOG_API_KEY"),
    )

    # -----------------------------
    # Create products
    # -----------------------------
    print("\nCreating products...")
    desk = c.create_product("Standing Desk", 349.0, "Electric height-adjustable desk", "Furniture")["product"]
    lamp = c.create_product("Desk Lamp", 29.5, category="furniture", in_stock=False)["product"]
    print(desk)
    print(lamp)

    # -----------------------------
    # List / filter
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nFurniture in stock...")
    print(c.list_products(category="FURNITURE", in_stock=True))

    # -----------------------------
    # Partial update
    # -----------------------------
    print("\nRestocking the lamp...")
    print(c.update_product(lamp["id"], in_stock=True, price=24.0))

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the desk...")
    print(c.delete_product(desk["id"]))
    print(c.list_products(category="furniture"))


if __name__ == "__main__":
    main()
