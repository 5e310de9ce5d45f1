"""Streamlit UI for ReTree."""

from __future__ import annotations

import streamlit as st
from streamlit.components.v1 import html as st_html

from ReTree.clipboard import build_copy_script, can_copy
from ReTree.outline_parser import OutlineFormatError
from ReTree.tree_builder import render

_PLACEHOLDER = """- project
    - src
        - main.py
        - utils.py
    - README.md"""


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="ReTree",
        page_icon="🌲",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("ReTree")
    st.caption(
        "Convert an indented `- ` list (4 spaces per level) into an ASCII tree."
    )

    input_col, output_col = st.columns(2)

    with input_col:
        outline = st.text_area(
            "Outline",
            value=_qp("outline"),
            placeholder=_PLACEHOLDER,
            height=400,
        )
        convert_clicked = st.button(
            "Convert",
            type="primary",
            use_container_width=True,
        )

    # Empty input: nothing to do
    if convert_clicked and outline:
        _run_conversion(outline)

    with output_col:
        if "result" in st.session_state:
            _show_result(st.session_state["result"])
        else:
            st.text_area("Tree", value="", height=400, disabled=True)


def _run_conversion(outline: str) -> None:
    try:
        tree = render(outline)
    except OutlineFormatError as exc:
        st.session_state["result"] = {
            "tree": str(exc),
            "error_lines": exc.result.error_lines if exc.result else [],
            "root_count": exc.result.root_count if exc.result else 0,
        }
        return

    st.session_state["result"] = {
        "tree": tree,
        "error_lines": [],
        "root_count": 1,
    }


def _show_result(result: dict) -> None:
    """Display the tree (or the format error) with copy/download actions."""
    tree = result["tree"]

    st.text_area("Tree", value=tree, height=400, disabled=True)

    if not can_copy(tree):
        st.error("The outline does not match the expected format.")
        error_lines = result["error_lines"]
        with st.expander("Details", expanded=True):
            if error_lines:
                st.text(
                    "Lines without a '- ' marker at a 4-space indent: "
                    + ", ".join(str(n) for n in error_lines)
                )
            if result["root_count"] != 1:
                st.text(
                    f"Expected exactly one root entry, found {result['root_count']}."
                )
        return

    st_html(build_copy_script(tree), height=50)

    st.download_button(
        label="Download",
        data=tree,
        file_name="tree.txt",
        mime="text/plain",
        use_container_width=True,
    )


if __name__ == "__main__":
    main()
