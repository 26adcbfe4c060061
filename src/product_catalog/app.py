from typing import Iterable, Optional
from uuid import uuid4

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .auth import AuthResult, check_api_key
from .config import API_KEY_HEADER, Settings
from .models import Product, default_products
from .query import ProductFilter, filter_products, paginate, positive_int, search_products
from .stats import compute_stats
from .store import ProductStore
from .validation import CREATE, UPDATE, product_fields, validate_product


ENDPOINTS = {
    "getAllProducts": "GET /api/products",
    "getProduct": "GET /api/products/:id",
    "createProduct": f"POST /api/products (requires {API_KEY_HEADER} header)",
    "updateProduct": f"PUT /api/products/:id (requires {API_KEY_HEADER} header)",
    "deleteProduct": f"DELETE /api/products/:id (requires {API_KEY_HEADER} header)",
    "searchProducts": "GET /api/products/search?q=term",
    "getStats": "GET /api/products/stats",
}

_AUTH_ERRORS = {
    AuthResult.MISSING: {
        "error": "Authentication required",
        "message": f"Please provide an API key in the {API_KEY_HEADER} header",
    },
    AuthResult.INVALID: {
        "error": "Invalid API key",
        "message": "The provided API key is invalid",
    },
}


def _not_found(product_id: str):
    return jsonify({
        "error": "Product not found",
        "message": f"Product with ID {product_id} does not exist",
    }), 404


def _route_not_found():
    return jsonify({
        "error": "Route not found",
        "message": f"The route {request.full_path.rstrip('?')} does not exist on this server",
    }), 404


def _json_body():
    # missing or malformed bodies count as an empty object
    data = request.get_json(silent=True)
    return {} if data is None else data


def create_app(settings: Optional[Settings] = None,
               products: Optional[Iterable[Product]] = None) -> Flask:
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    store = ProductStore(default_products() if products is None else products)
    app.extensions["product_store"] = store
    app.extensions["product_settings"] = settings

    def authorize():
        result = check_api_key(request.headers.get(API_KEY_HEADER), settings.api_key)
        if result is AuthResult.OK:
            return None
        app.logger.warning("Rejected %s %s: API key %s", request.method, request.path, result.value)
        return jsonify(_AUTH_ERRORS[result]), 401

    def validated_body(mode: str):
        data = _json_body()
        if not isinstance(data, dict):
            errors = ["Request body must be a JSON object"]
        else:
            errors = validate_product(data, mode)
        if errors:
            return None, (jsonify({"error": "Validation failed", "details": errors}), 400)
        return data, None

    @app.before_request
    def log_request():
        app.logger.info("%s %s", request.method, request.full_path.rstrip("?"))

    @app.get("/")
    def index():
        return jsonify({"message": "Welcome to the Product API!", "endpoints": ENDPOINTS}), 200

    @app.get("/api/products")
    def list_products():
        criteria = ProductFilter.from_args(request.args)
        page = positive_int(request.args.get("page"), 1)
        limit = positive_int(request.args.get("limit"), settings.default_page_limit)
        matched = filter_products(store.list(), criteria)
        return jsonify(paginate(matched, page, limit).to_dict()), 200

    @app.get("/api/products/search")
    def search():
        term = request.args.get("q")
        if not term:
            return jsonify({
                "error": "Search term required",
                "message": 'Please provide a search term using the "q" query parameter',
            }), 400
        results = search_products(store.list(), term)
        return jsonify({
            "searchTerm": term,
            "count": len(results),
            "data": [p.to_dict() for p in results],
        }), 200

    @app.get("/api/products/stats")
    def stats():
        return jsonify(compute_stats(store.list())), 200

    @app.get("/api/products/<product_id>")
    def get_product(product_id: str):
        product = store.find(product_id)
        if product is None:
            return _not_found(product_id)
        return jsonify(product.to_dict()), 200

    @app.post("/api/products")
    def create_product():
        denied = authorize()
        if denied:
            return denied
        data, invalid = validated_body(CREATE)
        if invalid:
            return invalid
        product = store.append(Product(id=str(uuid4()), **product_fields(data, CREATE)))
        app.logger.info("Created product %s", product.id)
        return jsonify({"message": "Product created successfully", "product": product.to_dict()}), 201

    @app.put("/api/products/<product_id>")
    def update_product(product_id: str):
        denied = authorize()
        if denied:
            return denied
        data, invalid = validated_body(UPDATE)
        if invalid:
            return invalid
        product = store.update(product_id, **product_fields(data, UPDATE))
        if product is None:
            return _not_found(product_id)
        app.logger.info("Updated product %s", product_id)
        return jsonify({"message": "Product updated successfully", "product": product.to_dict()}), 200

    @app.delete("/api/products/<product_id>")
    def delete_product(product_id: str):
        denied = authorize()
        if denied:
            return denied
        product = store.remove(product_id)
        if product is None:
            return _not_found(product_id)
        app.logger.info("Deleted product %s", product_id)
        return jsonify({"message": "Product deleted successfully", "product": product.to_dict()}), 200

    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(_error):
        return _route_not_found()

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return error
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({
            "error": "Internal server error",
            "message": "Something went wrong on the server",
        }), 500

    return app
