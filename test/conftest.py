import pytest

from codeblog.config import Settings


def make_post(directory, name, title="", date="", tags="", preview="", body="Body."):
    lines = []
    if title:
        lines.append(f"title: {title}")
    if date:
        lines.append(f"date: {date}")
    if tags:
        lines.append(f"tags: {tags}")
    if preview:
        lines.append(f"preview: {preview}")
    path = directory / name
    path.write_text("\n".join(lines) + "\n---\n" + body + "\n", encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    """a.md (2024-01-01, x), b.md (2024-03-01, x y) y un readme.md que se ignora"""
    posts = tmp_path / "posts"
    posts.mkdir()
    make_post(posts, "a.md", title="Post A", date="2024-01-01", tags="x", preview="About *a*")
    make_post(posts, "b.md", title="Post B", date="2024-03-01", tags="x y", preview="About b")
    (posts / "readme.md").write_text("title: Not a post\n---\nDocs.\n", encoding="utf-8")
    return posts


@pytest.fixture
def settings(tmp_path, content_dir, monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("BLOG_CONTENT_DIR", raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text(
        '{"title": "Test Blog", "email": "Me@Example.com", '
        '"base_url": "https://blog.example.com", "social": {"github": "me"}}',
        encoding="utf-8",
    )
    return Settings(config_file=config_file, content_dir=content_dir)
