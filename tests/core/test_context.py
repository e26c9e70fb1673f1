import uuid

import pytest

from custom_fetch.core.context import BlobPayload, BodyKind, RequestContext, ResponseContext


def test_request_context_defaults():
    context = RequestContext(method="GET", url="/posts")

    assert context.headers == {}
    assert context.content is None
    assert context.body_kind is BodyKind.NONE
    assert isinstance(context.transaction_id, uuid.UUID)


def test_request_contexts_get_distinct_transaction_ids():
    assert RequestContext("GET", "/a").transaction_id != RequestContext("GET", "/a").transaction_id


def test_set_body_replaces_content_type_case_insensitively():
    context = RequestContext(method="POST", url="/posts", headers={"content-type": "text/plain", "X-Trace": "1"})

    context.set_body(b"{}", "application/json", BodyKind.JSON)

    assert context.headers == {"X-Trace": "1", "Content-Type": "application/json"}
    assert context.content == b"{}"
    assert context.body_kind is BodyKind.JSON


def test_set_body_last_writer_wins():
    context = RequestContext(method="POST", url="/posts")

    context.set_body(b"{}", "application/json", BodyKind.JSON)
    context.set_body(b"a=1", "application/x-www-form-urlencoded", BodyKind.URLENCODED)

    assert context.content == b"a=1"
    assert context.body_kind is BodyKind.URLENCODED
    assert context.headers == {"Content-Type": "application/x-www-form-urlencoded"}


@pytest.mark.parametrize(
    "status_code, expected",
    [(200, True), (201, True), (204, True), (299, True), (199, False), (300, False), (401, False), (500, False)],
)
def test_response_context_ok(status_code, expected):
    assert ResponseContext(status_code=status_code).ok is expected


def test_blob_payload_size():
    blob = BlobPayload(content=b"%PDF-1.4", content_type="application/pdf")
    assert blob.size == 8
    assert BlobPayload(content=b"").content_type == "application/octet-stream"
