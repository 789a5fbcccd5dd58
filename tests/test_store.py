"""Tests for the metadata store."""

from __future__ import annotations

import threading

from apimeta.models import ElementKind, ElementRef
from apimeta.store import MetadataStore


class Cat:
    pass


def handler() -> None:
    pass


def test_store_keeps_namespaces_apart() -> None:
    store = MetadataStore()
    ref = ElementRef.for_class(Cat)

    store.set(ref, "responses", {"default": 1})
    store.set(ref, "extensions", {"x-a": 1})

    assert store.get(ref, "responses") == {"default": 1}
    assert store.get(ref, "extensions") == {"x-a": 1}
    assert store.get(ref, "hidden") is None
    assert store.get(ref, "hidden", False) is False
    assert store.namespaces(ref) == ["responses", "extensions"]


def test_store_update_writes_merged_fragment() -> None:
    store = MetadataStore()
    ref = ElementRef.for_method(handler)

    store.update(ref, "names", lambda existing: (existing or ()) + ("a",))
    result = store.update(ref, "names", lambda existing: (existing or ()) + ("b",))

    assert result == ("a", "b")
    assert store.get(ref, "names") == ("a", "b")


def test_snapshot_is_read_only() -> None:
    store = MetadataStore()
    ref = ElementRef.for_class(Cat)
    store.set(ref, "responses", {})

    snapshot = store.snapshot(ref)

    assert dict(snapshot) == {"responses": {}}
    try:
        snapshot["responses"] = {"x": 1}  # type: ignore[index]
    except TypeError:
        pass
    else:  # pragma: no cover - failure path
        raise AssertionError("snapshot should be immutable")


def test_elements_filter_by_kind_and_find_by_id() -> None:
    store = MetadataStore()
    class_ref = ElementRef.for_class(Cat)
    prop_ref = ElementRef.for_property(Cat, "age")
    store.set(class_ref, "properties", ("age",))
    store.set(prop_ref, "property", {"minimum": 1})

    assert list(store.elements(ElementKind.PROPERTY)) == [prop_ref]
    assert store.find(prop_ref.id) == prop_ref
    assert store.find("class:missing.Missing") is None
    assert len(store) == 2

    store.clear()
    assert len(store) == 0


def test_element_ids_are_stable() -> None:
    assert ElementRef.for_class(Cat).id == f"class:{__name__}.Cat"
    assert ElementRef.for_property(Cat, "age").id == f"property:{__name__}.Cat.age"
    assert ElementRef.for_method(handler).id == f"method:{__name__}.handler"
    assert ElementRef.schema("Letters").id == "schema:Letters"


def test_concurrent_updates_are_not_lost() -> None:
    store = MetadataStore()
    ref = ElementRef.for_class(Cat)

    def worker() -> None:
        for _ in range(200):
            store.update(ref, "count", lambda existing: (existing or 0) + 1)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.get(ref, "count") == 800


def test_views_do_not_expose_stored_fragments() -> None:
    store = MetadataStore()
    ref = ElementRef.for_method(handler)
    store.set(ref, "responses", {200: "ok"})

    view = store.view(ref, "responses")
    nested = store.snapshot(ref)["responses"]

    for fragment in (view, nested):
        try:
            fragment[404] = "missing"  # type: ignore[index]
        except TypeError:
            pass
        else:  # pragma: no cover - failure path
            raise AssertionError("fragment views should be immutable")

    assert store.get(ref, "responses") == {200: "ok"}
    assert store.view(ref, "names", ()) == ()
