# /tests/test_messages.py

import asyncio

import pytest

from school_admin.controllers.list_helpers.messages import MessageBoard, MessageKind


def test_posting_replaces_the_current_message():
    board = MessageBoard(timeout=3)
    board.post_error("Failed to load students")
    board.post_success("Student created successfully!")

    assert board.success == "Student created successfully!"
    assert board.error is None
    assert board.current.kind == MessageKind.SUCCESS


def test_stale_expiry_does_not_clear_newer_message():
    board = MessageBoard(timeout=3)
    first = board.post_error("first")
    second = board.post_success("second")

    assert board.expire(first) is False
    assert board.success == "second"
    assert board.expire(second) is True
    assert board.current is None


def test_clear_error_leaves_success_alone():
    board = MessageBoard(timeout=3)
    board.post_success("saved")
    board.clear_error()
    assert board.success == "saved"


@pytest.mark.asyncio
async def test_message_auto_clears_after_timeout():
    board = MessageBoard(timeout=0.05)
    board.post_error("boom")
    await asyncio.sleep(0.1)
    assert board.current is None


@pytest.mark.asyncio
async def test_earlier_timer_does_not_cut_later_message_short():
    board = MessageBoard(timeout=0.1)
    board.post_error("early")
    await asyncio.sleep(0.06)
    board.post_success("late")
    # The first timer fires here, but it belongs to the replaced message.
    await asyncio.sleep(0.06)
    assert board.success == "late"
    await asyncio.sleep(0.1)
    assert board.current is None
