"""Tests for authorization header resolution."""

from notionloom.auth import resolve_auth_header


def test_no_token_gives_no_header():
    assert resolve_auth_header(None, None) == {}


def test_per_call_token_wins_over_default():
    assert resolve_auth_header("X", "Y") == {"authorization": "Bearer X"}


def test_default_token_used_when_no_override():
    assert resolve_auth_header(None, "Y") == {"authorization": "Bearer Y"}


def test_per_call_token_without_default():
    assert resolve_auth_header("X") == {"authorization": "Bearer X"}
