"""Tests for the contacts mediator."""

import pytest


@pytest.mark.asyncio
async def test_list_passes_filters_through(kvcore, stub_api):
    stub_api.reply(200, json={"data": [{"id": 1}]})

    result = await kvcore.contacts.list({"filter[leadtype]": "buyer", "limit": 5})

    assert result == {"data": [{"id": 1}]}
    assert stub_api.last.method == "GET"
    assert stub_api.last.url.path.endswith("/contacts")
    assert stub_api.last.url.params["filter[leadtype]"] == "buyer"
    assert stub_api.last.url.params["limit"] == "5"


@pytest.mark.asyncio
async def test_list_without_filters(kvcore, stub_api):
    await kvcore.contacts.list()

    assert stub_api.last.url.query == b""


@pytest.mark.asyncio
async def test_get(kvcore, stub_api):
    stub_api.reply(200, json={"data": {"id": 42}})

    assert await kvcore.contacts.get(42) == {"data": {"id": 42}}
    assert stub_api.last.url.path.endswith("/contact/42")


@pytest.mark.asyncio
async def test_create_and_update(kvcore, stub_api):
    await kvcore.contacts.create({"first_name": "Jane", "email": "jane@example.com"})
    assert stub_api.last.method == "POST"
    assert stub_api.last.url.path.endswith("/contact")
    assert stub_api.last_json() == {"first_name": "Jane", "email": "jane@example.com"}

    await kvcore.contacts.update(42, {"status": 4})
    assert stub_api.last.method == "PUT"
    assert stub_api.last.url.path.endswith("/contact/42")
    assert stub_api.last_json() == {"status": 4}


@pytest.mark.asyncio
async def test_delete_uses_trailing_slash(kvcore, stub_api):
    stub_api.reply(204)

    assert await kvcore.contacts.delete(42) is None
    assert stub_api.last.method == "DELETE"
    assert stub_api.last.url.path.endswith("/contact/42/")


@pytest.mark.asyncio
async def test_tags(kvcore, stub_api):
    await kvcore.contacts.get_tags(42)
    assert stub_api.last.method == "GET"
    assert stub_api.last.url.path.endswith("/contact/42/tags")

    await kvcore.contacts.add_tags(42, [{"name": "#buyer", "locked": False}])
    assert stub_api.last.method == "PUT"
    assert stub_api.last_json() == [{"name": "#buyer", "locked": False}]


@pytest.mark.asyncio
async def test_remove_tags_sends_body_with_delete(kvcore, stub_api):
    await kvcore.contacts.remove_tags(42, ["#old", "#stale"])

    assert stub_api.last.method == "DELETE"
    assert stub_api.last.url.path.endswith("/contact/42/tags")
    assert stub_api.last_json() == ["#old", "#stale"]


@pytest.mark.asyncio
async def test_listing_views_and_market_report(kvcore, stub_api):
    await kvcore.contacts.get_listing_views(42)
    assert stub_api.last.url.path.endswith("/contact/42/listingviews")

    await kvcore.contacts.get_market_reports(42)
    assert stub_api.last.url.path.endswith("/contact/42/marketreport")


@pytest.mark.asyncio
async def test_send_email_issues_one_put(kvcore, stub_api):
    """Test that send_email makes exactly one PUT with the email body."""
    stub_api.reply(200, json={"data": {"sent": True}})

    result = await kvcore.contacts.send_email(42, {"subject": "Hi", "message": "Hello"})

    assert result == {"data": {"sent": True}}
    assert len(stub_api.requests) == 1
    assert stub_api.last.method == "PUT"
    assert stub_api.last.url.path.endswith("/contact/42/email")
    assert stub_api.last_json() == {"subject": "Hi", "message": "Hello"}


@pytest.mark.asyncio
async def test_send_text(kvcore, stub_api):
    await kvcore.contacts.send_text(42, {"message": "Hello"})

    assert stub_api.last.method == "PUT"
    assert stub_api.last.url.path.endswith("/contact/42/text")


@pytest.mark.asyncio
async def test_question_and_appointment(kvcore, stub_api):
    await kvcore.contacts.ask_question(42, {"mls_id": "A1", "question": "Pool?"})
    assert stub_api.last.method == "POST"
    assert stub_api.last.url.path.endswith("/contact/42/question")

    await kvcore.contacts.request_appointment(42, {"mls_id": "A1", "date": "2024-05-01"})
    assert stub_api.last.method == "POST"
    assert stub_api.last.url.path.endswith("/contact/42/appointment")
