"""Browser clipboard helper for the rendered tree."""

from __future__ import annotations

import html
import json

from ReTree.outline_parser import FORMAT_ERROR

FORMAT_ERROR_MESSAGE = FORMAT_ERROR
COPY_LABEL = "copy to clipboard"
COPIED_LABEL = "copied!"
COPIED_FLASH_MS = 2000


def can_copy(text: str | None) -> bool:
    """Return False when there is no tree to copy yet."""
    return bool(text) and text != FORMAT_ERROR_MESSAGE


def build_copy_script(text: str, button_label: str = COPY_LABEL) -> str:
    """Build an HTML button that copies *text* to the clipboard on click.

    The button reads ``copied!`` for two seconds after a successful copy.
    Meant to be embedded with ``streamlit.components.v1.html``.
    """
    if not can_copy(text):
        raise ValueError("Nothing to copy.")

    # "</" would close the <script> element early
    payload = json.dumps(text).replace("</", "<\\/")
    label = json.dumps(button_label)
    copied = json.dumps(COPIED_LABEL)
    return f"""
        <button id="copy" style="width: 100%; padding: 0.4rem;">{html.escape(button_label)}</button>
        <script>
        const button = document.getElementById("copy");
        button.addEventListener("click", (event) => {{
            event.preventDefault();
            navigator.clipboard.writeText({payload}).then(() => {{
                button.textContent = {copied};
                setTimeout(() => {{
                    button.textContent = {label};
                }}, {COPIED_FLASH_MS});
            }});
        }});
        </script>
        """
