from streamlit.testing.v1 import AppTest


def _app():
    return AppTest.from_file("../app.py", default_timeout=30)


def test_keypad_evaluates_expression():
    at = _app()
    at.run()
    for key in ("2", "+", "3", "="):
        at.button(key=f"sc_key_{key}").click().run()
    assert not at.exception
    assert at.session_state["sc_display"] == "5"
    assert at.session_state["sc_calculator"].last_answer == "5"


def test_typed_expression_in_degrees():
    at = _app()
    at.run()
    at.text_input(key="sc_display").input("sin(30)").run()
    at.button(key="sc_key_=").click().run()
    assert at.session_state["sc_display"] == "0.5"


def test_invalid_expression_shows_error():
    at = _app()
    at.run()
    at.text_input(key="sc_display").input("2+").run()
    at.button(key="sc_key_=").click().run()
    assert not at.exception
    assert at.session_state["sc_display"] == "Error"
