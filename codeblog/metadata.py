import re
from datetime import date

import frontmatter

from codeblog.logger import logger


class MetadataExtractor:
    """
    Lee la cabecera de un post línea a línea ("clave: valor").
    Nunca falla: un campo ausente queda como "" (o [] para tags).
    """

    def _get_text(self, data, name):
        match = re.search(rf'^{name}:(.*)$', data, re.MULTILINE)
        return match.group(1).strip() if match else ''

    def _get_values(self, data, name):
        return self._get_text(data, name).split()

    def extract(self, data):
        return {
            'preview': self._get_text(data, 'preview'),
            'title': self._get_text(data, 'title'),
            'tags': self._get_values(data, 'tags'),
            'date': self._get_text(data, 'date'),
        }


class FrontMatterExtractor:
    """
    Alternativa con YAML real (python-frontmatter) para la misma cabecera.
    Devuelve exactamente las mismas claves que MetadataExtractor.
    """

    def extract(self, data):
        try:
            metadata = frontmatter.loads(f"---\n{data.strip()}\n---\n").metadata
        except Exception as e:
            logger.warning(f"⚠️ Cabecera YAML inválida, se ignora: {e}")
            metadata = {}

        tags = metadata.get('tags') or []
        if isinstance(tags, str):
            tags = tags.split()

        raw_date = metadata.get('date', '')
        if isinstance(raw_date, date):
            raw_date = raw_date.isoformat()

        return {
            'preview': str(metadata.get('preview') or '').strip(),
            'title': str(metadata.get('title') or '').strip(),
            'tags': [str(tag) for tag in tags],
            'date': str(raw_date or '').strip(),
        }
