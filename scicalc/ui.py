"""Streamlit rendering of the calculator page.

All state changes happen in button callbacks via :mod:`scicalc.session`, so
the display widget is never modified after it has been instantiated.
"""

from __future__ import annotations

import html
import re

import streamlit as st

from scicalc import session
from scicalc.config import get_config

FUNCTION_ROWS = [
    ["sin", "cos", "tan", "asin", "acos", "atan"],
    ["sqrt", "log", "ln", "abs", "exp", "pow"],
]

KEYPAD_ROWS = [
    ["7", "8", "9", "÷", "("],
    ["4", "5", "6", "×", ")"],
    ["1", "2", "3", "-", "^"],
    ["0", ".", "%", "+", "!"],
    ["pi", "e", ",", "ans", "="],
]

KEY_LABELS = {"pi": "π", "ans": "Ans"}

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>])")


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", str(text))


def _key_callback(key: str):
    if key == "=":
        return session.evaluate_display, ()
    if key == "ans":
        return session.insert_answer, ()
    return session.append_to_display, (key,)


def _render_keypad(state) -> None:
    for row in FUNCTION_ROWS:
        cols = st.columns(len(row))
        for col, name in zip(cols, row):
            with col:
                st.button(
                    name,
                    key=f"sc_fn_{name}",
                    on_click=session.insert_function,
                    args=(state, name),
                    use_container_width=True,
                )

    for row in KEYPAD_ROWS:
        cols = st.columns(len(row))
        for col, key in zip(cols, row):
            callback, extra = _key_callback(key)
            with col:
                st.button(
                    escape_markdown(KEY_LABELS.get(key, key)),
                    key=f"sc_key_{key}",
                    on_click=callback,
                    args=(state, *extra),
                    type="primary" if key == "=" else "secondary",
                    use_container_width=True,
                )

    edit_cols = st.columns(2)
    with edit_cols[0]:
        st.button("⌫", key="sc_del", on_click=session.delete_last, args=(state,), use_container_width=True)
    with edit_cols[1]:
        st.button("C", key="sc_clear", on_click=session.clear_display, args=(state,), use_container_width=True)


def _render_history(state, calculator) -> None:
    meta_cols = st.columns([3, 1])
    with meta_cols[0]:
        st.markdown(
            f'<div class="sc-meta"><div>History</div><div>Ans: <b>{html.escape(calculator.last_answer) or "-"}</b></div></div>',
            unsafe_allow_html=True,
        )
    with meta_cols[1]:
        st.button("Clear history", key="sc_clear_history", on_click=session.clear_history, args=(state,))

    if not len(calculator.history):
        st.markdown('<div class="sc-history-empty">No calculations yet.</div>', unsafe_allow_html=True)
        return

    for index, entry in enumerate(calculator.history):
        st.button(
            f"{escape_markdown(entry.expression)} = {escape_markdown(entry.result)}",
            key=f"sc_history_{index}",
            on_click=session.recall_history,
            args=(state, index),
            use_container_width=True,
        )


def render_calculator() -> None:
    state = st.session_state
    session.init_state(state, get_config())
    calculator = session.get_calculator(state)

    st.markdown(
        '<div class="sc-header"><div class="sc-title">Scientific Calculator</div>'
        '<div class="sc-sub">Safe evaluation • degrees or radians • history</div></div>',
        unsafe_allow_html=True,
    )

    top = st.columns([4, 1])
    with top[0]:
        st.text_input(
            "Expression",
            key=session.DISPLAY_KEY,
            placeholder="0",
            label_visibility="collapsed",
        )
    with top[1]:
        st.button(
            calculator.angle_label,
            key="sc_mode",
            on_click=session.toggle_angle_mode,
            args=(state,),
            help="Toggle degrees / radians",
            use_container_width=True,
        )

    if state.get(session.ERROR_KEY):
        st.caption("The expression could not be evaluated. Clear or edit it to continue.")

    _render_keypad(state)
    _render_history(state, calculator)

    st.markdown(
        "<div class='sc-footer'>Functions: sin, cos, tan, asin, acos, atan, sqrt, log, ln, abs, exp, pow • "
        "Constants: π, e • Postfix: %, !</div>",
        unsafe_allow_html=True,
    )
