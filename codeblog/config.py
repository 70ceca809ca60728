import hashlib
import json
import os
from pathlib import Path

from codeblog.logger import logger

DEFAULT_PORT = 9111
DEFAULT_SITE = {
    "email": "",
    "title": "codeblog",
    "description": "",
    "author": "",
    "social": {},
    "theme": "monokai",
    "base_url": "http://localhost:9111/",
    "content_dir": "posts",
}


def gravatar_url(email, size=200):
    email_hash = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    return f"https://www.gravatar.com/avatar/{email_hash}?s={size}"


class BlogConfig:
    """Configuración estática del sitio (config.json) que reciben las vistas"""

    def __init__(self, config_file='config.json'):
        self.config_file = Path(config_file)
        self.site = self._load_config()

    def _load_config(self):
        """Carga el archivo de configuración JSON"""
        site = dict(DEFAULT_SITE)
        if not self.config_file.exists():
            logger.warning(f"⚠️ No se encontró {self.config_file}, se usan valores por defecto")
        else:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"❌ {self.config_file} no es un JSON válido: {e}") from e
            if not isinstance(data, dict):
                raise ValueError(f"❌ {self.config_file} debe contener un objeto JSON")
            site.update(data)

        if not site["base_url"].endswith("/"):
            site["base_url"] += "/"
        site["gravatar"] = gravatar_url(site["email"]) if site["email"] else ""
        return site

    @property
    def content_dir(self):
        """Directorio de posts; relativo a la ubicación de config.json"""
        path = Path(self.site["content_dir"])
        if not path.is_absolute():
            path = self.config_file.parent / path
        return path


class Settings:
    """Parámetros de ejecución, decididos una sola vez al arrancar"""

    def __init__(self, config_file=None, content_dir=None, production=None, port=None):
        self.blog = BlogConfig(config_file or os.getenv("BLOG_CONFIG", "config.json"))
        self.site = self.blog.site

        content_dir = content_dir or os.getenv("BLOG_CONTENT_DIR")
        self.content_dir = Path(content_dir) if content_dir else self.blog.content_dir

        if production is None:
            production = os.getenv("FLASK_ENV", "development") == "production"
        self.production = production
        # En desarrollo los posts se releen en cada petición
        self.auto_reload = not production

        self.port = int(port or os.getenv("PORT", DEFAULT_PORT))

    def __repr__(self):
        mode = "production" if self.production else "development"
        return f"<Settings mode={mode} content_dir=\"{self.content_dir}\" port={self.port}>"
