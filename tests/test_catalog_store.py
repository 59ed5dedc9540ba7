"""Tests for the client-side CatalogStore and its RemoteSyncAdapter."""

import logging

from application.catalog_store import CatalogStore
from application.sync import RemoteSyncAdapter
from core.entities import Product
from tests.conftest import FakeGateway, make_document, make_input


class TestAddProduct:
    def test_returns_provisional_record_synchronously(self, store, gateway):
        gateway.release.clear()
        product = store.add_product(make_input(name="X", price=10))

        assert isinstance(product.id, int)
        assert product.rating == 0
        assert product.reviews == 0
        # visible before the service has answered
        assert [p.id for p in store.products] == [product.id]

        gateway.release.set()
        assert store.wait_for_sync(timeout=5)

    def test_provisional_ids_are_unique(self, sync):
        store = CatalogStore(sync, clock=lambda: 1000)
        sync.gateway.release.clear()

        first = store.add_product(make_input(name="A"))
        second = store.add_product(make_input(name="B"))
        third = store.add_product(make_input(name="C"))

        assert [first.id, second.id, third.id] == [1000, 1001, 1002]
        sync.gateway.release.set()
        store.wait_for_sync(timeout=5)

    def test_confirmed_record_replaces_provisional(self, store, gateway):
        provisional = store.add_product(make_input(name="Gown"))
        assert store.wait_for_sync(timeout=5)

        products = store.products
        assert len(products) == 1
        assert products[0].id == "srv1"
        assert products[0].name == "Gown"
        assert store.get_product(provisional.id) is None

    def test_create_posts_input_without_defaults(self, store, gateway):
        store.add_product(make_input())
        store.wait_for_sync(timeout=5)

        kind, document = gateway.calls[0]
        assert kind == "create"
        assert "rating" not in document
        assert "id" not in document
        assert document["name"] == "Silk Saree"

    def test_failed_create_keeps_provisional(self, store, gateway, caplog):
        gateway.fail = True
        with caplog.at_level(logging.ERROR, logger="application.sync"):
            provisional = store.add_product(make_input())
            assert store.wait_for_sync(timeout=5)

        assert [p.id for p in store.products] == [provisional.id]
        assert "Failed to sync with API" in caplog.text

    def test_confirmation_for_deleted_provisional_is_dropped(self, store, gateway):
        gateway.release.clear()
        provisional = store.add_product(make_input())
        store.delete_product(provisional.id)
        gateway.release.set()
        store.wait_for_sync(timeout=5)

        assert store.products == []


class TestUpdateProduct:
    def test_overwrites_fields_and_keeps_id(self, store, gateway):
        store.replace_all([Product.from_document(make_document(_id="a", rating=4.5, reviews=10))])

        updated = store.update_product("a", make_input(name="Renamed", price=999))

        assert updated.id == "a"
        assert updated.name == "Renamed"
        assert updated.price == 999
        assert updated.rating == 0
        assert updated.reviews == 0
        assert store.get_product("a") == updated

        store.wait_for_sync(timeout=5)
        assert gateway.calls[-1][0:2] == ("update", "a")

    def test_failed_update_is_not_rolled_back(self, store, gateway):
        store.replace_all([Product.from_document(make_document(_id="a"))])
        gateway.fail = True

        store.update_product("a", make_input(name="Local only"))
        store.wait_for_sync(timeout=5)

        assert store.get_product("a").name == "Local only"

    def test_unknown_id_changes_nothing_locally(self, store):
        store.replace_all([Product.from_document(make_document(_id="a"))])
        assert store.update_product("zzz", make_input(name="Ghost")) is None
        assert [p.name for p in store.products] == ["Silk Saree"]
        store.wait_for_sync(timeout=5)


class TestDeleteProduct:
    def test_removes_and_fires_remote_delete(self, store, gateway):
        store.replace_all([
            Product.from_document(make_document(_id="a")),
            Product.from_document(make_document(_id="b")),
        ])

        store.delete_product("a")

        assert [p.id for p in store.products] == ["b"]
        store.wait_for_sync(timeout=5)
        assert ("delete", "a") in gateway.calls

    def test_unknown_id_is_a_noop(self, store):
        store.replace_all([Product.from_document(make_document(_id="a"))])
        store.delete_product("missing")
        assert store.wait_for_sync(timeout=5)
        assert [p.id for p in store.products] == ["a"]


class TestLoad:
    def test_replaces_defaults_with_remote_list(self):
        gateway = FakeGateway(listing=[make_document(_id="a")])
        sync = RemoteSyncAdapter(gateway)
        store = CatalogStore(sync, initial=[Product.from_document(make_document(id=1))])
        try:
            store.load().result(timeout=5)
        finally:
            sync.close()

        assert [p.id for p in store.products] == ["a"]

    def test_empty_listing_keeps_local_collection(self):
        sync = RemoteSyncAdapter(FakeGateway(listing=[]))
        store = CatalogStore(sync, initial=[Product.from_document(make_document(id=1))])
        try:
            assert store.load().result(timeout=5) is False
        finally:
            sync.close()

        assert [p.id for p in store.products] == [1]

    def test_malformed_listing_is_logged_and_keeps_local_collection(self, caplog):
        sync = RemoteSyncAdapter(FakeGateway(listing=["not-a-document"]))
        store = CatalogStore(sync, initial=[Product.from_document(make_document(id=1))])
        try:
            with caplog.at_level(logging.ERROR, logger="application.sync"):
                store.load()
                assert store.wait_for_sync(timeout=5)
        finally:
            sync.close()

        assert [p.id for p in store.products] == [1]
        assert "Catalog sync task failed" in caplog.text

    def test_failed_listing_keeps_local_collection(self):
        gateway = FakeGateway(listing=[make_document(_id="a")])
        gateway.fail = True
        sync = RemoteSyncAdapter(gateway)
        store = CatalogStore(sync, initial=[Product.from_document(make_document(id=1))])
        try:
            assert store.load().result(timeout=5) is False
        finally:
            sync.close()

        assert [p.id for p in store.products] == [1]


class TestListeners:
    def test_listener_sees_each_change(self):
        store = CatalogStore()
        seen = []
        unsubscribe = store.subscribe(lambda products: seen.append(len(products)))

        p = store.add_product(make_input())
        store.delete_product(p.id)
        unsubscribe()
        store.add_product(make_input())

        assert seen == [1, 0]

    def test_store_without_sync_is_local_only(self):
        store = CatalogStore()
        assert store.load() is None
        store.add_product(make_input())
        assert store.wait_for_sync() is True
        assert len(store.products) == 1


def test_adapter_pool_size_is_configurable():
    sync = RemoteSyncAdapter(FakeGateway(), max_workers=2)
    try:
        assert sync.executor._max_workers == 2
    finally:
        sync.close()
