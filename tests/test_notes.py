"""Tests for the notes mediator."""

import pytest


@pytest.mark.asyncio
async def test_list_and_get(kvcore, stub_api):
    await kvcore.notes.list(42)
    assert stub_api.last.method == "GET"
    assert stub_api.last.url.path.endswith("/contact/42/action/note")

    await kvcore.notes.get(42, 7)
    assert stub_api.last.url.path.endswith("/contact/42/action/note/7")


@pytest.mark.asyncio
async def test_create_uses_put_on_collection(kvcore, stub_api):
    note = {"date": "2024-05-01", "title": "Initial Contact", "details": "Hello"}

    await kvcore.notes.create(42, note)

    assert stub_api.last.method == "PUT"
    assert stub_api.last.url.path.endswith("/contact/42/action/note")
    assert stub_api.last_json() == note


@pytest.mark.asyncio
async def test_update(kvcore, stub_api):
    await kvcore.notes.update(42, 7, {"title": "Updated"})

    assert stub_api.last.method == "PUT"
    assert stub_api.last.url.path.endswith("/contact/42/action/note/7")
