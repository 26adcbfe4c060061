import os
import random
import string
from threading import Lock

from locust import HttpUser, between, tag, task


API_KEY = os.environ.get("API_KEY", "secret-api-key-123")
CATEGORIES = ["electronics", "kitchen", "furniture", "garden"]
SEARCH_TERMS = ["coffee", "chair", "laptop", "wireless", "nothing-matches"]

_ids_lock = Lock()
_ids = []


def _rand_word(size: int = 6) -> str:
    return "".join(random.choice(string.ascii_lowercase) for _ in range(size))


class CatalogReader(HttpUser):
    wait_time = between(0.05, 0.15)
    weight = 3

    @task(5)
    @tag("read")
    def list_products(self):
        params = {"page": random.randint(1, 3), "limit": random.choice([1, 5, 10])}
        if random.random() < 0.5:
            params["category"] = random.choice(CATEGORIES)
        if random.random() < 0.3:
            params["maxPrice"] = random.choice([50, 200, 1000])
        self.client.get("/api/products", params=params, name="GET /api/products")

    @task(2)
    @tag("read")
    def search(self):
        self.client.get("/api/products/search", params={"q": random.choice(SEARCH_TERMS)},
                        name="GET /api/products/search")

    @task(1)
    @tag("read")
    def stats(self):
        self.client.get("/api/products/stats", name="GET /api/products/stats")


class CatalogWriter(HttpUser):
    wait_time = between(0.05, 0.15)
    weight = 1

    def on_start(self):
        self.client.headers["X-API-Key"] = API_KEY

    @task(3)
    @tag("write")
    def create_and_get(self):
        payload = {
            "name": "prod-" + _rand_word(),
            "description": "load test " + _rand_word(10),
            "price": round(random.uniform(1.0, 100.0), 2),
            "category": random.choice(CATEGORIES),
            "inStock": random.random() < 0.7,
        }
        r = self.client.post("/api/products", json=payload, name="POST /api/products")
        if r.status_code == 201:
            pid = r.json().get("product", {}).get("id")
            if isinstance(pid, str):
                with _ids_lock:
                    _ids.append(pid)
                self.client.get(f"/api/products/{pid}", name="GET /api/products/:id")

    @task(1)
    @tag("write")
    def update_or_delete(self):
        with _ids_lock:
            pid = random.choice(_ids) if _ids else None
        if pid is None:
            return
        if random.random() < 0.5:
            with self.client.put(f"/api/products/{pid}", json={"price": round(random.uniform(1.0, 100.0), 2)},
                                 name="PUT /api/products/:id", catch_response=True) as r:
                # another writer may have deleted it already
                if r.status_code in (200, 404):
                    r.success()
        else:
            with self.client.delete(f"/api/products/{pid}", name="DELETE /api/products/:id",
                                    catch_response=True) as r:
                if r.status_code in (200, 404):
                    r.success()
                    with _ids_lock:
                        try:
                            _ids.remove(pid)
                        except ValueError:
                            pass
