# catalogsdk/pycatalog.py
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print


class CatalogClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        token: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    @staticmethod
    def _list_params(category: Optional[str], in_stock: Optional[bool]) -> Dict[str, str]:
        params = {}
        if category:
            params["category"] = category
        if in_stock is not None:
            params["inStock"] = "true" if in_stock else "false"
        return params

    @staticmethod
    def _fields(**fields) -> Dict[str, Any]:
        # python-style keyword names -> JSON field names; None means "not sent"
        body = {}
        for key, value in fields.items():
            if value is None:
                continue
            body["inStock" if key == "in_stock" else key] = value
        return body

    # Products
    def list_products(self, category: Optional[str] = None, in_stock: Optional[bool] = None):
        r = self.session.get(f"{self.base_url}/products", params=self._list_params(category, in_stock), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(
        self,
        name: str,
        price: float,
        description: Optional[str] = None,
        category: Optional[str] = None,
        in_stock: Optional[bool] = None,
    ):
        payload = self._fields(name=name, price=price, description=description, category=category, in_stock=in_stock)
        r = self.session.post(f"{self.base_url}/products", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, **fields):
        r = self.session.put(f"{self.base_url}/products/{product_id}", json=self._fields(**fields), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async listing (example)
    async def list_products_async(self, category: Optional[str] = None, in_stock: Optional[bool] = None):
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=dict(self.session.headers),
            transport=self.async_transport,
        ) as client:
            r = await client.get(f"{self.base_url}/products", params=self._list_params(category, in_stock))
            r.raise_for_status()
            return r.json()


def _parse_bool(raw: str) -> bool:
    return raw.lower() in ("1", "true", "yes")


if __name__ == "__main__":
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Product catalog client")
    parser.add_argument("--base-url", default=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--token", default=os.getenv("CATALOG_TOKEN"), help="Bearer token for mutating calls")
    parser.add_argument("--api-key", default=os.getenv("CATALOG_API_KEY"), help="Value for the x-api-key header")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Filter by category (case-insensitive)")
    lp.add_argument("--in-stock", type=_parse_bool, help="Filter by stock status (true/false)")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--description")
    cp.add_argument("--category")
    cp.add_argument("--in-stock", type=_parse_bool)

    up = subparsers.add_parser("update", help="Update some fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--price", type=float)
    up.add_argument("--description")
    up.add_argument("--category")
    up.add_argument("--in-stock", type=_parse_bool)

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url, token=args.token, api_key=args.api_key)

    if args.command == "list":
        print(c.list_products(args.category, args.in_stock))
    elif args.command == "get":
        print(c.get_product(args.product_id))
    elif args.command == "create":
        print(c.create_product(args.name, args.price, args.description, args.category, args.in_stock))
    elif args.command == "update":
        print(c.update_product(
            args.product_id,
            name=args.name,
            price=args.price,
            description=args.description,
            category=args.category,
            in_stock=args.in_stock,
        ))
    elif args.command == "delete":
        print(c.delete_product(args.product_id))
