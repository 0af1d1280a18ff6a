from fastapi.templating import Jinja2Templates
from backend.config import TEMPLATES_DIR

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def _money(value) -> str:
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return "$0.00"

def _date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else ""

templates.env.filters["money"] = _money
templates.env.filters["date"] = _date
