import xml.etree.ElementTree as ET
from datetime import timezone
from email.utils import format_datetime

from codeblog.rendering import utcnow

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _to_xml(root):
    return XML_DECLARATION + ET.tostring(root, encoding='unicode')


def _rfc822(date):
    return format_datetime(date.replace(tzinfo=timezone.utc))


def post_url(base_url, post):
    return f"{base_url}posts/{post.url}"


def build_sitemap(posts, base_url):
    """
    Genera sitemap.xml con la home y un <url> por post.
    base_url debe terminar en '/'.
    """
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)

    # Añadir la home
    url = ET.SubElement(urlset, "url")
    ET.SubElement(url, "loc").text = base_url
    ET.SubElement(url, "lastmod").text = utcnow().strftime("%Y-%m-%d")
    ET.SubElement(url, "changefreq").text = "daily"

    for post in posts:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = post_url(base_url, post)
        if post.date:
            ET.SubElement(url, "lastmod").text = post.date.strftime("%Y-%m-%d")
        ET.SubElement(url, "changefreq").text = "weekly"

    return _to_xml(urlset)


def build_rss(posts, site):
    """
    Genera rss.xml (RSS 2.0) a partir de la configuración del sitio
    """
    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")

    ET.SubElement(channel, "title").text = site["title"]
    ET.SubElement(channel, "link").text = site["base_url"]
    ET.SubElement(channel, "description").text = site["description"]
    ET.SubElement(channel, "lastBuildDate").text = _rfc822(utcnow())

    for post in posts:
        link = post_url(site["base_url"], post)
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = post.title or post.url
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid").text = link
        ET.SubElement(item, "description").text = post.preview
        if post.date:
            ET.SubElement(item, "pubDate").text = _rfc822(post.date)
        for tag in post.tags:
            ET.SubElement(item, "category").text = tag

    return _to_xml(rss)
