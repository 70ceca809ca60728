from pathlib import Path

import markdown

from codeblog.dates import parse_date
from codeblog.logger import logger
from codeblog.metadata import MetadataExtractor
from codeblog.models import Post

DELIMITER = '---'
EXCLUDED_FILES = {'readme.md'}


class ContentParser:
    def __init__(self, extractor=None):
        self.extractor = extractor or MetadataExtractor()

    def _markdown(self):
        # Una instancia por conversión: Markdown guarda estado (footnotes, toc)
        # y no se puede compartir entre hilos.
        # Bloques de código sin prefijo: ```python -> <code class="python">
        return markdown.Markdown(
            extensions=['fenced_code', 'tables', 'footnotes', 'toc'],
            extension_configs={'fenced_code': {'lang_prefix': ''}},
        )

    def render(self, text):
        """Convierte markdown a HTML"""
        if not text.strip():
            return ''
        return self._markdown().convert(text)

    def parse(self, raw_md, filename):
        """Construye un Post a partir del texto completo de un fichero"""
        if DELIMITER in raw_md:
            head, body = raw_md.split(DELIMITER, 1)
        else:
            logger.warning(f"⚠️ {filename} no tiene separador '{DELIMITER}', se carga sin metadatos")
            head, body = '', raw_md

        meta = self.extractor.extract(head)
        date_obj = parse_date(meta['date'])
        if meta['date'] and date_obj is None:
            logger.warning(f"⚠️ Fecha inválida en {filename}: '{meta['date']}'")

        return Post(
            url=Path(filename).stem,
            title=meta['title'],
            tags=tuple(meta['tags']),
            date=date_obj,
            preview=self.render(meta['preview']),
            body=self.render(body),
            path=str(filename),
        )

    def load(self, content_dir):
        """Lee todos los *.md (no recursivo) de content_dir, en orden de nombre"""
        content_dir = Path(content_dir)
        if not content_dir.exists():
            raise FileNotFoundError(f"❌ No existe el directorio de contenido: {content_dir}")
        if not content_dir.is_dir():
            raise NotADirectoryError(f"❌ No es un directorio: {content_dir}")

        posts = []
        for file in sorted(content_dir.glob('*.md')):
            if not file.is_file() or file.name.lower() in EXCLUDED_FILES:
                continue
            raw_md = file.read_text(encoding='utf-8')
            posts.append(self.parse(raw_md, file))

        logger.debug(f"Cargados {len(posts)} posts desde {content_dir}")
        return posts
