"""Tests for order number allocation on insert."""

import threading
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from storefront.core.config import settings
from storefront.db import hooks
from storefront.models import Order, OrderNumberCounter
from storefront.services.order_service import OrderService

SHIPPING = {
    "name": "Alice Kim",
    "address_line_1": "1 Main St",
    "city": "Springfield",
    "postal_code": "62701",
    "country": "United States",
}


@pytest.fixture
def frozen_day(monkeypatch):
    """Pin the allocator clock to 2025-09-17 12:00 UTC."""
    moment = {"now": datetime(2025, 9, 17, 12, 0, tzinfo=timezone.utc)}
    monkeypatch.setattr(hooks, "current_time", lambda: moment["now"])
    return moment


def insert_order(db, user, order_number=None):
    order = Order(user_id=user.id, order_number=order_number, shipping_address=dict(SHIPPING))
    db.add(order)
    db.commit()
    return order


class TestParseOrderSuffix:
    def test_numeric_suffix(self):
        assert hooks.parse_order_suffix("ORD-20250917-0042", "ORD-20250917-") == 42

    def test_non_numeric_suffix_is_zero(self):
        assert hooks.parse_order_suffix("ORD-20250917-ABCD", "ORD-20250917-") == 0

    def test_missing_suffix_is_zero(self):
        assert hooks.parse_order_suffix("ORD-20250917-", "ORD-20250917-") == 0
        assert hooks.parse_order_suffix(None, "ORD-20250917-") == 0


class TestOrderDay:
    def test_defaults_to_utc(self):
        assert hooks.order_day(datetime(2025, 9, 17, 23, 30, tzinfo=timezone.utc)) == "20250917"

    def test_configured_timezone(self, monkeypatch):
        monkeypatch.setattr(settings, "ORDER_NUMBER_TIMEZONE", "Asia/Seoul")
        assert hooks.order_day(datetime(2025, 9, 17, 20, 0, tzinfo=timezone.utc)) == "20250918"


class TestAllocation:
    def test_first_and_second_order_of_day(self, db, user, frozen_day):
        first = insert_order(db, user)
        second = insert_order(db, user)

        assert first.order_number == "ORD-20250917-0001"
        assert second.order_number == "ORD-20250917-0002"

    def test_continues_after_existing_orders(self, db, user, frozen_day):
        for n in range(1, 4):
            insert_order(db, user, order_number=f"ORD-20250917-{n:04d}")

        assert insert_order(db, user).order_number == "ORD-20250917-0004"

    def test_preassigned_number_is_untouched(self, db, user, frozen_day):
        order = insert_order(db, user, order_number="ORD-20250101-0007")

        db.expire_all()
        assert db.get(Order, order.id).order_number == "ORD-20250101-0007"
        # 사전 지정 번호는 카운터를 건드리지 않음
        assert db.get(OrderNumberCounter, "20250101") is None

    def test_empty_string_counts_as_missing(self, db, user, frozen_day):
        assert insert_order(db, user, order_number="").order_number == "ORD-20250917-0001"

    def test_new_day_restarts_at_one(self, db, user, frozen_day):
        insert_order(db, user)
        insert_order(db, user)

        frozen_day["now"] = datetime(2025, 9, 18, 0, 5, tzinfo=timezone.utc)
        assert insert_order(db, user).order_number == "ORD-20250918-0001"

    def test_non_numeric_suffix_treated_as_zero(self, db, user, frozen_day):
        insert_order(db, user, order_number="ORD-20250917-MANUAL")

        assert insert_order(db, user).order_number == "ORD-20250917-0001"

    def test_other_days_are_ignored(self, db, user, frozen_day):
        insert_order(db, user, order_number="ORD-20250916-0099")

        assert insert_order(db, user).order_number == "ORD-20250917-0001"

    def test_several_orders_in_one_flush(self, db, user, frozen_day):
        orders = [Order(user_id=user.id, shipping_address=dict(SHIPPING)) for _ in range(3)]
        db.add_all(orders)
        db.commit()

        numbers = sorted(order.order_number for order in orders)
        assert numbers == ["ORD-20250917-0001", "ORD-20250917-0002", "ORD-20250917-0003"]

    def test_numbers_not_reused_after_delete(self, db, user, frozen_day):
        insert_order(db, user)
        latest = insert_order(db, user)
        db.delete(latest)
        db.commit()

        assert insert_order(db, user).order_number == "ORD-20250917-0003"

    def test_duplicate_preassigned_number_fails(self, db, user, frozen_day):
        insert_order(db, user, order_number="ORD-20250917-0001")

        with pytest.raises(IntegrityError):
            insert_order(db, user, order_number="ORD-20250917-0001")
        db.rollback()


class TestCollisionRetry:
    def test_retries_on_order_number_collision(self, db, user, catalog, frozen_day, monkeypatch):
        insert_order(db, user)
        real_next = hooks.next_order_number
        calls = []

        def colliding_next(connection, day):
            calls.append(day)
            if len(calls) == 1:
                return "ORD-20250917-0001"
            return real_next(connection, day)

        monkeypatch.setattr(hooks, "next_order_number", colliding_next)
        product = catalog["products"]["WBH-001"]

        order = OrderService(db).create_order(user.id, {
            "shipping_address": SHIPPING,
            "items": [{"product_id": product.id, "quantity": 1}],
        })

        assert len(calls) == 2
        assert order.order_number == "ORD-20250917-0002"

    def test_gives_up_after_max_retries(self, db, user, catalog, frozen_day, monkeypatch):
        insert_order(db, user)
        monkeypatch.setattr(hooks, "next_order_number", lambda connection, day: "ORD-20250917-0001")
        monkeypatch.setattr(settings, "ORDER_NUMBER_MAX_RETRIES", 2)
        product = catalog["products"]["WBH-001"]

        with pytest.raises(IntegrityError):
            OrderService(db).create_order(user.id, {
                "shipping_address": SHIPPING,
                "items": [{"product_id": product.id, "quantity": 1}],
            })


class TestConcurrentAllocation:
    def test_concurrent_inserts_get_distinct_numbers(self, session_factory, db, user, other_user, frozen_day):
        user_ids = [user.id, other_user.id]
        errors = []

        def place(user_id):
            session = session_factory()
            try:
                for _ in range(5):
                    session.add(Order(user_id=user_id, shipping_address=dict(SHIPPING)))
                    session.commit()
            except Exception as e:
                errors.append(e)
            finally:
                session.close()

        threads = [threading.Thread(target=place, args=(user_ids[i % 2],)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        numbers = [number for (number,) in db.query(Order.order_number).all()]
        assert len(numbers) == 20
        assert sorted(numbers) == [f"ORD-20250917-{n:04d}" for n in range(1, 21)]
