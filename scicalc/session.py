"""Display and calculator state kept in a Streamlit ``session_state``.

Every function takes the state mapping explicitly so it works the same with
``st.session_state`` or a plain dict.
"""

from __future__ import annotations

from typing import MutableMapping, Optional

from .calculator import CalcResult, Calculator
from .config import CalculatorConfig

DISPLAY_KEY = "sc_display"
CALCULATOR_KEY = "sc_calculator"
ERROR_KEY = "sc_error"

ERROR_TEXT = "Error"

FUNCTION_NAMES = (
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sqrt", "log", "ln", "abs", "exp", "pow",
)


def init_state(state: MutableMapping, config: Optional[CalculatorConfig] = None) -> None:
    if DISPLAY_KEY not in state:
        state[DISPLAY_KEY] = ""
    if CALCULATOR_KEY not in state:
        state[CALCULATOR_KEY] = Calculator(config)
    if ERROR_KEY not in state:
        state[ERROR_KEY] = False


def get_calculator(state: MutableMapping) -> Calculator:
    init_state(state)
    return state[CALCULATOR_KEY]


def _showing_error(state: MutableMapping) -> bool:
    return bool(state.get(ERROR_KEY)) and state.get(DISPLAY_KEY) == ERROR_TEXT


def _current_display(state: MutableMapping) -> str:
    # The error indicator is replaced by whatever is typed next.
    if _showing_error(state):
        state[ERROR_KEY] = False
        return ""
    return state.get(DISPLAY_KEY) or ""


def append_to_display(state: MutableMapping, value) -> None:
    value = str(value)
    if value == "pi":
        value = "π"
    state[DISPLAY_KEY] = _current_display(state) + value


def delete_last(state: MutableMapping) -> None:
    state[DISPLAY_KEY] = _current_display(state)[:-1]


def clear_display(state: MutableMapping) -> None:
    state[ERROR_KEY] = False
    state[DISPLAY_KEY] = ""


def insert_answer(state: MutableMapping) -> None:
    append_to_display(state, get_calculator(state).last_answer)


def insert_function(state: MutableMapping, name: str) -> None:
    if name not in FUNCTION_NAMES:
        raise ValueError(f"Unknown function: {name}")
    append_to_display(state, f"{name}(")


def toggle_angle_mode(state: MutableMapping) -> bool:
    return get_calculator(state).toggle_angle_mode()


def evaluate_display(state: MutableMapping) -> Optional[CalcResult]:
    """Evaluate the display and show the result or the error indicator.

    Returns None when the display is blank or already shows the indicator.
    """
    if _showing_error(state):
        return None
    result = get_calculator(state).evaluate(state.get(DISPLAY_KEY) or "")
    if result.is_empty:
        return None
    if result.ok:
        state[DISPLAY_KEY] = result.formatted
        state[ERROR_KEY] = False
    else:
        state[DISPLAY_KEY] = ERROR_TEXT
        state[ERROR_KEY] = True
    return result


def recall_history(state: MutableMapping, index: int) -> None:
    entry = get_calculator(state).history[index]
    state[ERROR_KEY] = False
    state[DISPLAY_KEY] = entry.expression


def clear_history(state: MutableMapping) -> None:
    get_calculator(state).clear_history()
