"""Static export: render every page once and write it out as plain HTML."""

import logging
import shutil
from pathlib import Path

from flask import render_template

from errors import FreezeError
from i18n import Translator
from locales import DEFAULT_LOCALE, SUPPORTED_LOCALES
from navigation import PAGE_KEYS, page_path
from router import DEFAULT_ROOT

logger = logging.getLogger("harmiana.freeze")

# Written at the site root and as the host's not-found page.
REDIRECT_PAGES = ("index.html", "404.html")


def page_paths():
    for locale in SUPPORTED_LOCALES:
        for key in PAGE_KEYS:
            yield page_path(locale, key)


def freeze_site(app, output_dir):
    """Write the whole site to ``output_dir`` and return the files written.

    The directory is emptied first. Each page lands at
    ``<locale>/<page>/index.html`` so the hosted URLs match the dev server's.
    """
    output = Path(output_dir)
    if output.exists():
        shutil.rmtree(output)
    output.mkdir(parents=True)

    written = []
    client = app.test_client()
    for path in page_paths():
        response = client.get(path)
        if response.status_code != 200:
            raise FreezeError(path, response.status_code)
        dest = output / path.strip("/") / "index.html"
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(response.data)
        logger.info("Built %s", dest.relative_to(output))
        written.append(dest)

    # Page requests may share the CLI's app context, so the language is
    # passed explicitly instead of read from ``g``.
    with app.test_request_context(DEFAULT_ROOT):
        redirect_html = render_template(
            "redirect.html",
            target=DEFAULT_ROOT,
            lang=DEFAULT_LOCALE,
            t=Translator(language=DEFAULT_LOCALE),
        )
    for name in REDIRECT_PAGES:
        dest = output / name
        dest.write_text(redirect_html, encoding="utf-8")
        logger.info("Built %s -> %s", name, DEFAULT_ROOT)
        written.append(dest)

    if app.static_folder and Path(app.static_folder).is_dir():
        shutil.copytree(app.static_folder, output / "static")
        logger.info("Copied static assets")

    return written
