from scicalc.config import configure_logging
from scicalc.theme import set_theme
from scicalc.ui import render_calculator

set_theme()
configure_logging()

render_calculator()
