import threading
from datetime import datetime

from codeblog.logger import logger
from codeblog.parser import ContentParser


def _sort_key(post):
    # Posts sin fecha válida van al final
    return (post.date is not None, post.date or datetime.min)


class PostIndex:
    """
    Colección en memoria de los posts, ordenada por fecha (reciente primero).

    Con auto_reload=True (desarrollo) cada consulta vuelve a leer el disco;
    en producción se carga una vez al arrancar y no se refresca.
    """

    def __init__(self, content_dir, auto_reload=False, parser=None):
        self.content_dir = content_dir
        self.auto_reload = auto_reload
        self.parser = parser or ContentParser()
        self.loaded = False
        self._posts = ()
        self._lock = threading.Lock()
        # Una sola recarga a la vez
        self._reload_lock = threading.Lock()

    def init(self):
        """Recarga todo desde el disco y reemplaza la colección"""
        with self._reload_lock:
            posts = self.parser.load(self.content_dir)
            # sorted() es estable también con reverse=True
            posts = tuple(sorted(posts, key=_sort_key, reverse=True))

            with self._lock:
                self._posts = posts
                self.loaded = True

        logger.debug(f"📚 {len(posts)} posts cargados desde {self.content_dir}")
        return posts

    def _current(self):
        if self.auto_reload:
            return self.init()
        with self._lock:
            return self._posts

    def find(self, url=None):
        posts = self._current()
        if url is None:
            return posts
        for post in posts:
            if post.url == url:
                return post
        return None

    def find_by_tag(self, tag):
        return tuple(post for post in self._current() if post.has_tag(tag))

    def tags(self):
        """Etiquetas -> número de posts, en orden de aparición"""
        counts = {}
        for post in self._current():
            for tag in post.tags:
                counts[tag] = counts.get(tag, 0) + 1
        return counts
