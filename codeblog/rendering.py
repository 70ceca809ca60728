from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from codeblog.dates import relative_date

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'
STATIC_DIR = Path(__file__).resolve().parent / 'static'


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def relative_date_filter(date):
    # "Ahora" se calcula en cada render, nunca se guarda en el post
    return relative_date(date, utcnow())


def format_date(date, fmt="%d %b %Y"):
    return date.strftime(fmt) if date else ""


def tag_path(tag):
    # Un solo segmento de URL, también para etiquetas como "c/c++"
    return quote(tag, safe="")


def register_filters(env):
    env.filters['tag_path'] = tag_path
    env.filters['relative_date'] = relative_date_filter
    env.filters['format_date'] = format_date
    return env


def create_environment():
    """Entorno Jinja2 para renderizar fuera de Flask (exportación estática)"""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml']),
    )
    return register_filters(env)
