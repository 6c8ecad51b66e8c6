from __future__ import annotations

from qrmenu.core.config import QR_CODE_SERVICE_URL, QR_CODE_SIZE
from qrmenu.utils.qr_codes import build_qr_code_url


def test_url_embeds_percent_encoded_menu_url():
    url = build_qr_code_url("https://menu.example.com/a b?x=1&y=2")

    assert url == (
        f"{QR_CODE_SERVICE_URL}?size={QR_CODE_SIZE}"
        "&data=https%3A%2F%2Fmenu.example.com%2Fa%20b%3Fx%3D1%26y%3D2"
    )


def test_url_is_deterministic():
    assert build_qr_code_url("https://menu.example.com") == build_qr_code_url("https://menu.example.com")


def test_unreserved_characters_left_alone():
    url = build_qr_code_url("https://m.example.com/~menu_(v2)!*'-.")

    assert url.endswith("data=https%3A%2F%2Fm.example.com%2F~menu_(v2)!*'-.")


def test_revision_makes_url_distinct():
    base = build_qr_code_url("https://menu.example.com")

    assert build_qr_code_url("https://menu.example.com", 0) == base
    assert build_qr_code_url("https://menu.example.com", 1) == base + "&v=1"
    assert build_qr_code_url("https://menu.example.com", 2) != build_qr_code_url("https://menu.example.com", 1)
