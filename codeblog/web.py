import time

from flask import Blueprint, Flask, Response, abort, current_app, g, render_template, request
from markupsafe import escape

from codeblog.config import Settings
from codeblog.index import PostIndex
from codeblog.logger import logger
from codeblog.rendering import STATIC_DIR, TEMPLATES_DIR, register_filters
from codeblog.seo import build_rss, build_sitemap

INDEX_KEY = "codeblog.index"

blog_bp = Blueprint('blog', __name__)


def get_index() -> PostIndex:
    return current_app.extensions[INDEX_KEY]


def render(template, **context):
    """render_template con la configuración del sitio siempre disponible"""
    return render_template(template, config=current_app.config["SITE"], **context)


@blog_bp.route("/")
def index():
    """Lista completa, o la ayuda si aún no hay posts."""
    posts = get_index().find()
    if not posts:
        return render("help.html")
    return render("index.html", posts=posts)


@blog_bp.route("/tag/<path:tag>")
def tag(tag):
    # <path:tag> admite etiquetas con "/" (codificadas como %2F en los enlaces)
    tag = tag.rstrip("/")
    posts = get_index().find_by_tag(tag)
    if not posts:
        return render("help.html", tag=tag)
    return render("index.html", posts=posts, tag=tag)


@blog_bp.route("/posts/<url>")
@blog_bp.route("/<url>")
def post(url):
    found = get_index().find(url)
    if found is None:
        abort(404)
    return render("post.html", post=found)


@blog_bp.route("/rss.xml")
def rss():
    xml = build_rss(get_index().find(), current_app.config["SITE"])
    return Response(xml, mimetype="application/rss+xml")


@blog_bp.route("/sitemap.xml")
def sitemap():
    xml = build_sitemap(get_index().find(), current_app.config["SITE"]["base_url"])
    return Response(xml, mimetype="application/xml")


def handle_not_found(error):
    logger.warning(f"404: {request.path}")
    return render("404.html"), 404


def handle_internal_error(error):
    original = getattr(error, "original_exception", None) or error
    logger.error(f"❌ Error interno en {request.path}: {original}", exc_info=original)
    # En desarrollo se muestra el error en la respuesta
    if current_app.debug:
        return f"Internal server error: {escape(repr(original))}", 500
    return "An internal server error occurred.", 500


def log_request(response):
    elapsed = time.time() - g.get("request_start_time", time.time())
    logger.info(f"{request.method} {request.path} {response.status_code} {elapsed:.3f}s")
    return response


def create_app(settings=None, index=None):
    """
    Crea la aplicación Flask. Los posts se cargan aquí, una vez:
    si el directorio de contenido no existe, la app no arranca.
    """
    settings = settings or Settings()
    index = index or PostIndex(settings.content_dir, auto_reload=settings.auto_reload)

    posts = index.init()
    logger.info(f"✅ {len(posts)} posts cargados desde {index.content_dir} ({settings!r})")

    app = Flask(__name__, template_folder=str(TEMPLATES_DIR), static_folder=str(STATIC_DIR))
    app.debug = not settings.production
    # Los errores llegan siempre al handler de 500, también con debug
    app.config["PROPAGATE_EXCEPTIONS"] = False
    app.config["SITE"] = settings.site
    app.extensions[INDEX_KEY] = index
    register_filters(app.jinja_env)

    @app.before_request
    def start_timer():
        g.request_start_time = time.time()

    app.after_request(log_request)
    app.register_error_handler(404, handle_not_found)
    app.register_error_handler(500, handle_internal_error)
    app.register_blueprint(blog_bp)

    return app
