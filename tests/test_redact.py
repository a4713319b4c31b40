from __future__ import annotations

from orgadmin._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "email": "admin@example.org",
        "password": "pw",
        "nested": {"Authorization": "Bearer abc", "items": [{"token": "t"}]},
    }

    redacted = redact_for_log(payload)
    assert redacted["email"] == "admin@example.org"
    assert redacted["password"] == "<redacted>"
    assert redacted["nested"]["Authorization"] == "<redacted>"
    assert redacted["nested"]["items"][0]["token"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_passes_scalars_through() -> None:
    assert redact_for_log(None) is None
    assert redact_for_log(3) == 3
    assert redact_for_log(b"abc") == "<bytes:3b>"


def test_redact_for_log_only_masks_credentials() -> None:
    payload = {"email": "admin@example.org", "PassWord": "pw", "name": "HQ"}
    assert redact_for_log(payload) == {"email": "admin@example.org", "PassWord": "<redacted>", "name": "HQ"}


def test_redact_for_log_caps_nesting_depth() -> None:
    value: object = "leaf"
    for _ in range(20):
        value = [value]
    flattened = redact_for_log(value)
    while isinstance(flattened, list):
        flattened = flattened[0]
    assert flattened == "<max-depth>"
