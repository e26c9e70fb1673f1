import pytest

from custom_fetch.core.options import MultipartForm
from custom_fetch.hooks.slot import ABSENT, Absent, Present, slot_of


def test_absent_is_falsy_and_present_is_truthy():
    assert not ABSENT
    assert Present(None)
    assert Present(0)


def test_none_is_always_absent():
    assert slot_of(None) is ABSENT
    assert slot_of(None, empty_is_absent=True) is ABSENT


@pytest.mark.parametrize("value", [{}, [], 0, "", False])
def test_falsy_values_are_present_by_default(value):
    assert slot_of(value) == Present(value)


@pytest.mark.parametrize("value", [{}, [], "", MultipartForm()])
def test_empty_containers_are_absent_when_requested(value):
    assert isinstance(slot_of(value, empty_is_absent=True), Absent)


def test_non_sized_values_stay_present_when_empty_is_absent():
    assert slot_of(0, empty_is_absent=True) == Present(0)


def test_non_empty_form_is_present():
    form = MultipartForm().append("files", b"x", filename="x.txt")
    assert slot_of(form, empty_is_absent=True) == Present(form)
