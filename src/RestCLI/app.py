"""Streamlit viewer for RestCLI."""

from __future__ import annotations

import streamlit as st

from RestCLI.path_decoder import MalformedPathError
from RestCLI.record_filter import (
    PatternError,
    compile_patterns,
    filter_records,
    split_patterns,
)
from RestCLI.record_loader import RecordLoadError, load_records
from RestCLI.tree_renderer import render_records

_PREVIEW_MAX_LINES = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="RestCLI",
        page_icon="🌲",
        layout="wide",
    )

    st.title("RestCLI")
    st.caption("Render resource records (path → attributes) as a compressed tree.")

    uploaded = st.file_uploader("Record document (YAML)", type=["yaml", "yml"])
    document = st.text_area(
        "…or paste it here",
        height=240,
        placeholder="/languages/rust:\n  GC: no\n/languages/rust/applications/restcli:\n  category: ultility",
    )

    root = st.text_input(
        "Subtree",
        value=_qp("root", "/"),
        help="Only records at or below this path are rendered.",
    )

    filter_raw = st.text_input(
        "Path filter (regex, comma-separated)",
        value=_qp("filter"),
        placeholder=r"applications, ^/languages/go",
        help=(
            "Only records whose raw path matches at least one pattern are rendered. "
            "Leave empty to include all records."
        ),
    )

    filter_patterns = split_patterns(filter_raw)
    filter_errors: list[str] = []
    try:
        compile_patterns(filter_patterns)
    except PatternError as exc:
        filter_errors = exc.errors
    for err in filter_errors:
        st.error(f"Invalid regex: {err}")

    render_clicked = st.button(
        "Render",
        type="primary",
        use_container_width=True,
        disabled=bool(filter_errors),
    )

    if render_clicked:
        text = uploaded.getvalue().decode("utf-8") if uploaded is not None else document
        if text.strip():
            _run_render(text, root.strip() or "/", filter_patterns)
        else:
            st.error("Please upload or paste a record document.")
    elif "result" in st.session_state:
        _show_result(st.session_state["result"])


def _run_render(text: str, root: str, patterns: list[str]) -> None:
    try:
        records = load_records(text)
    except RecordLoadError as exc:
        st.error(f"Invalid record document: {exc}")
        return

    try:
        selected = filter_records(records, prefix=root, patterns=patterns)
        output = render_records(selected)
    except MalformedPathError as exc:
        st.error(str(exc))
        return

    if not selected:
        st.warning("No records matched the subtree and filter.")
        return

    st.info(f"Rendered {len(selected)} of {len(records)} records.")

    # Keep the result across reruns (e.g. download button click)
    st.session_state["result"] = {"tree": output}
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display download button and preview from a stored result."""
    tree_output = result["tree"]

    st.download_button(
        label="Download tree",
        data=tree_output,
        file_name="tree.txt",
        mime="text/plain",
        use_container_width=True,
    )

    preview_lines = tree_output.split("\n")
    with st.expander("Preview", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full content."
            )
        else:
            st.code(tree_output, language="text")


if __name__ == "__main__":
    main()
