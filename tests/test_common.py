# tests/test_common.py

from orders_api.schemas.order import OrderUpdate
from orders_api.schemas.product import ProductUpdate
from orders_api.services.common import collect_changes, resolve_pagination
from orders_api.services.product import UPDATABLE_FIELDS


def test_pagination_defaults():
    assert resolve_pagination() == (10, 0)


def test_pagination_keeps_given_values():
    assert resolve_pagination(5, 0) == (5, 0)
    assert resolve_pagination(20, 5) == (20, 5)


def test_pagination_has_no_upper_bound():
    assert resolve_pagination(10_000, None) == (10_000, 0)


def test_changes_skip_omitted_fields():
    update = ProductUpdate.model_validate({"price": 129.99})
    assert collect_changes(update, UPDATABLE_FIELDS) == {"price": 129.99}


def test_changes_keep_zero_values():
    update = ProductUpdate.model_validate({"price": 0, "quantity": 0})
    assert collect_changes(update, UPDATABLE_FIELDS) == {"price": 0, "quantity": 0}


def test_changes_skip_explicit_null():
    update = ProductUpdate.model_validate({"name": None, "quantity": 3})
    assert collect_changes(update, UPDATABLE_FIELDS) == {"quantity": 3}


def test_changes_skip_empty_status():
    assert collect_changes(OrderUpdate.model_validate({"status": ""}), ("status",)) == {}
    assert collect_changes(OrderUpdate.model_validate({}), ("status",)) == {}
    assert collect_changes(OrderUpdate.model_validate({"status": "COMPLETED"}), ("status",)) == {"status": "COMPLETED"}


def test_product_update_ignores_order_id():
    update = ProductUpdate.model_validate({"orderId": 99, "name": "Novo nome"})
    assert collect_changes(update, UPDATABLE_FIELDS) == {"name": "Novo nome"}
