# qrmenu/utils/qr_codes.py
from urllib.parse import quote

from qrmenu.core.config import QR_CODE_SERVICE_URL, QR_CODE_SIZE

# Characters JavaScript's encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_qr_code_url(menu_url: str, revision: int = 0) -> str:
    """Image URL for ``menu_url`` on the external QR service.

    Pure function of its arguments. ``revision`` is the regeneration counter;
    a non-zero value is appended so each regeneration gets a distinct URL.
    """
    url = f"{QR_CODE_SERVICE_URL}?size={QR_CODE_SIZE}&data={quote(menu_url, safe=_URI_COMPONENT_SAFE)}"
    if revision:
        url += f"&v={revision}"
    return url
