"""Sitemap and robots.txt generation."""

from __future__ import annotations

from datetime import date
from typing import Sequence
from xml.sax.saxutils import escape

STATIC_PATHS: tuple[str, ...] = ("/", "/cities", "/about", "/contact", "/privacy", "/terms")


def build_sitemap(
    base_url: str,
    city_slugs: Sequence[str],
    latest_month: str | None = None,
    today: date | None = None,
) -> str:
    """Render sitemap XML for the static pages and one page per city.

    City pages use the first day of the latest reporting month as ``lastmod``.
    """
    iso_today = (today or date.today()).isoformat()
    city_lastmod = f"{latest_month}-01" if latest_month else iso_today

    urls = [
        (f"{base_url}{path}", iso_today, "1.0" if path == "/" else "0.8")
        for path in STATIC_PATHS
    ]
    urls.extend((f"{base_url}/city/{slug}", city_lastmod, "0.7") for slug in city_slugs)

    entries = "\n".join(
        "  <url>\n"
        f"    <loc>{escape(loc)}</loc>\n"
        f"    <lastmod>{lastmod}</lastmod>\n"
        "    <changefreq>weekly</changefreq>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
        for loc, lastmod, priority in urls
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}\n"
        "</urlset>"
    )


def build_robots(sitemap_hosts: Sequence[str]) -> str:
    lines = ["User-agent: *", "Allow: /", ""]
    lines.extend(f"Sitemap: https://{host}/sitemap.xml" for host in sitemap_hosts)
    return "\n".join(lines) + "\n"
