import shutil
from pathlib import Path

from codeblog.logger import logger
from codeblog.rendering import STATIC_DIR, create_environment, tag_path
from codeblog.seo import build_rss, build_sitemap


class SiteGenerator:
    """Exporta el blog completo como HTML estático, con las mismas plantillas que el servidor"""

    def __init__(self, site, index, output_dir):
        self.site = site
        self.index = index
        self.env = create_environment()
        self.output_dir = Path(output_dir)
        self.written = []

    def generate(self):
        self.written = []
        posts = self.index.find()

        # 1. Renderizar Indice
        if posts:
            self._render('index.html', 'index.html', posts=posts)
        else:
            self._render('index.html', 'help.html')

        # 2. Renderizar Posts Individuales
        for post in posts:
            self._render(f'posts/{post.url}/index.html', 'post.html', post=post)

        # 3. Una página por etiqueta
        for tag in self.index.tags():
            self._render(f'tag/{tag_path(tag)}/index.html', 'index.html',
                         posts=self.index.find_by_tag(tag), tag=tag)

        self._render('404.html', '404.html')
        self._write('rss.xml', build_rss(posts, self.site))
        self._write('sitemap.xml', build_sitemap(posts, self.site['base_url']))
        self._copy_static()

        logger.info(f"✅ Sitio exportado en {self.output_dir} ({len(self.written)} ficheros)")
        return self.written

    def _render(self, path, template_name, **context):
        template = self.env.get_template(template_name)
        html = template.render(config=self.site, **context)
        self._write(path, html)

    def _write(self, path, content):
        target = self.output_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
        self.written.append(target)

    def _copy_static(self):
        target = self.output_dir / 'static'
        shutil.copytree(STATIC_DIR, target, dirs_exist_ok=True)
        self.written.extend(p for p in target.rglob('*') if p.is_file())
