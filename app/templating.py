from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.utils.formatting import format_rub, star_line

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["rub"] = format_rub
templates.env.filters["stars"] = star_line
templates.env.globals["current_year"] = lambda: datetime.now().year
