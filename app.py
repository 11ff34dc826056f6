import logging
from pathlib import Path

import click
from flask import Flask, g, redirect, render_template, request

from config import SiteConfig
from freeze import freeze_site
from i18n import Translator
from layout import LayoutShell
from locales import DEFAULT_LOCALE
from reveal import reveal_attributes
from router import Redirect, Screen, match_route


app = Flask(__name__)

BASE_DIR = Path(__file__).parent
SITE = SiteConfig.from_env()

app.config.update(DEBUG=SITE.debug, SITE=SITE)

logger = logging.getLogger("harmiana.app")


PAGE_TEMPLATES = {
    Screen.HOME: "home.html",
    Screen.PRIVACY: "legal.html",
    Screen.TERMS: "legal.html",
    Screen.ABOUT: "about.html",
}

SHOWCASE = [
    {"key": "game1", "image": "img/showcase-elm-hollow.svg"},
    {"key": "game2", "image": "img/showcase-tidewright.svg"},
]


def configure_logging(level):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------- locale helpers ----------

def site_config():
    return app.config["SITE"]


def propagate_locale(locale):
    """Point the request's translator and document language at ``locale``.

    Runs before the layout and page body are built, both of which read
    ``g.t``.
    """
    translator = g.t = Translator()
    translator.change_language(locale)
    g.lang = locale
    return translator


# ---------- inject_globals ----------
@app.context_processor
def inject_globals():
    lang = g.get("lang", DEFAULT_LOCALE)
    translator = g.get("t") or Translator(language=lang)
    config = site_config()

    return {
        "t": translator,
        "lang": lang,
        "site_name": config.site_name,
        "reveal": lambda: reveal_attributes(config.reveal_threshold),
    }


# ---------- pages ----------
@app.route("/", defaults={"path": ""})
@app.route("/<path:path>")
def page(path):
    outcome = match_route(request.path)
    if isinstance(outcome, Redirect):
        logger.debug("Redirecting %s to %s", request.path, outcome.location)
        return redirect(outcome.location)

    translator = propagate_locale(outcome.locale)

    shell = LayoutShell(outcome, translator, contact_email=site_config().contact_email)
    if request.args.get("menu") == "open":
        shell.toggle_menu()

    return render_template(
        PAGE_TEMPLATES[outcome.screen],
        page=outcome.screen.value,
        showcase=SHOWCASE,
        **shell.render_context(),
    )


# ---------- freeze ----------
@app.cli.command("freeze")
@click.option(
    "--output", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the static site to (defaults to the configured build_dir).",
)
def freeze_command(output):
    """Export every page to static HTML."""
    config = site_config()
    configure_logging(config.log_level)
    output = output or BASE_DIR / config.build_dir
    written = freeze_site(app, output)
    click.echo(f"Wrote {len(written)} files to {output}")


if __name__ == "__main__":
    configure_logging(SITE.log_level)
    app.run(host=SITE.host, port=SITE.port, debug=SITE.debug)
