from pathlib import Path
from typing import Optional

import streamlit as st

CSS_PATH = Path(__file__).resolve().parent / "assets" / "calculator.css"


def load_css(path: Path = CSS_PATH) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def set_theme(
    page_title: str = "Scientific Calculator",
    page_icon: str = "🧮",
    layout: str = "centered",
):
    """Configure the page and inject the calculator stylesheet.

    Called at the top of every rerun. Only the first set_page_config call of
    a session is accepted by Streamlit; the CSS is injected each time.
    """
    try:
        st.set_page_config(page_title=page_title, page_icon=page_icon, layout=layout)
    except Exception:
        # set_page_config can only be called once; ignore if already set.
        pass

    css = load_css()
    if css is None:
        st.error(f"Stylesheet not found at {CSS_PATH}.")
        return
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
