import pytest

from custom_fetch.core.context import Cancelled, Proceed, RequestContext
from custom_fetch.core.options import FetchOptions
from custom_fetch.hooks.authorization import MISSING_TOKEN_REASON, AuthorizationHook
from custom_fetch.hooks.slot import ABSENT, Present


@pytest.fixture
def context() -> RequestContext:
    return RequestContext(method="GET", url="/auth/posts")


def test_from_options_absent_when_not_required():
    assert AuthorizationHook.from_options(FetchOptions(token="ignored")).slot is ABSENT


def test_from_options_present_when_required():
    hook = AuthorizationHook.from_options(FetchOptions(bearer_token_required=True, token="abc"))
    assert hook.slot == Present("abc")


def test_from_options_present_with_missing_token():
    hook = AuthorizationHook.from_options(FetchOptions(bearer_token_required=True))
    assert hook.slot == Present(None)


def test_absent_slot_passes_through(context):
    result = AuthorizationHook().apply(context)

    assert result == Proceed(context)
    assert "Authorization" not in context.headers


def test_sets_bearer_header(context):
    result = AuthorizationHook(Present("abc")).apply(context)

    assert isinstance(result, Proceed)
    assert result.context.headers["Authorization"] == "Bearer abc"


def test_replaces_existing_authorization_header(context):
    context.headers = {"authorization": "Basic xyz", "Accept": "application/json"}

    AuthorizationHook(Present("abc")).apply(context)

    assert context.headers == {"Accept": "application/json", "Authorization": "Bearer abc"}


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_cancels(context, token):
    result = AuthorizationHook(Present(token)).apply(context)

    assert isinstance(result, Cancelled)
    assert result.reason == MISSING_TOKEN_REASON
    assert "Authorization" not in context.headers


def test_repr():
    assert repr(AuthorizationHook(Present("abc"))) == "<AuthorizationHook(stage=authorization, present)>"
    assert repr(AuthorizationHook()) == "<AuthorizationHook(stage=authorization, absent)>"
