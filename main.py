import argparse
import sys

from codeblog.config import Settings
from codeblog.generator import SiteGenerator
from codeblog.index import PostIndex
from codeblog.logger import logger
from codeblog.rendering import format_date
from codeblog.web import create_app


def list_posts(index):
    """Imprime los posts cargados, del más reciente al más antiguo"""
    posts = index.find()
    print(f"\n📋 {len(posts)} posts en {index.content_dir}:")
    for i, post in enumerate(posts, 1):
        date = format_date(post.date, "%Y-%m-%d") or "sin fecha"
        tags = ", ".join(post.tags)
        print(f"  {i}. [{date}] {post.url} - {post.title or '(sin título)'} {f'({tags})' if tags else ''}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Blog personal a partir de un directorio de ficheros markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos de uso:
  # Servir el blog (desarrollo: los posts se releen en cada petición)
  python main.py --serve

  # Servir en producción en otro puerto
  FLASK_ENV=production python main.py --port 8080

  # Exportar el sitio estático
  python main.py --build public

  # Listar los posts cargados
  python main.py --list
        """
    )

    # Fases de ejecución
    parser.add_argument('--serve', '-s', action='store_true',
                        help='Servir el blog por HTTP (por defecto)')
    parser.add_argument('--build', '-b', metavar='DIR',
                        help='Exportar el sitio como HTML estático en DIR')
    parser.add_argument('--list', '-l', action='store_true',
                        help='Listar los posts cargados')

    # Configuración
    parser.add_argument('--config', '-c', help='Ruta de config.json (o BLOG_CONFIG)')
    parser.add_argument('--content', help='Directorio de posts (o BLOG_CONTENT_DIR)')
    parser.add_argument('--port', '-p', type=int, help='Puerto HTTP (o PORT, por defecto 9111)')
    parser.add_argument('--production', action='store_true', default=None,
                        help='Modo producción: carga los posts una sola vez')

    args = parser.parse_args(argv)

    try:
        settings = Settings(config_file=args.config, content_dir=args.content,
                            production=args.production, port=args.port)
    except ValueError as e:
        logger.error(str(e))
        return 1

    index = PostIndex(settings.content_dir, auto_reload=False)

    if args.list or args.build:
        try:
            index.init()
        except OSError as e:
            logger.error(f"❌ No se pudieron cargar los posts: {e}")
            return 1

        if args.list:
            list_posts(index)
        if args.build:
            SiteGenerator(settings.site, index, args.build).generate()
        return 0

    # Por defecto: servir
    index.auto_reload = settings.auto_reload
    try:
        app = create_app(settings, index)
    except OSError as e:
        logger.error(f"❌ No se pudieron cargar los posts: {e}")
        return 1

    logger.info(f"🌐 Escuchando en http://0.0.0.0:{settings.port}/")
    app.run("0.0.0.0", settings.port, debug=app.debug, use_reloader=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
