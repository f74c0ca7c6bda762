import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from .config import WebConfig, load_web_config
from .errors import CalendarLinkError, UnknownProviderError
from .providers import Provider, calendar_link, calendar_links, generate, generate_all
from .sources import MappingEventSource, event_from_source

logger = logging.getLogger(__name__)


def register_template_functions(app: Flask) -> None:
    """Expose calendar_link() / calendar_links() to Jinja templates."""
    app.add_template_global(calendar_link, "calendar_link")
    app.add_template_global(calendar_links, "calendar_links")


def create_app() -> Flask:
    app = Flask(__name__)
    register_template_functions(app)

    @app.errorhandler(UnknownProviderError)
    def unknown_provider(e: UnknownProviderError):
        logger.warning("Rejected link request: %s", e)
        return jsonify(error=str(e)), 404

    @app.errorhandler(CalendarLinkError)
    def invalid_request(e: CalendarLinkError):
        logger.warning("Rejected link request: %s", e)
        return jsonify(error=str(e)), 400

    @app.get("/health")
    def health():
        return "ok", 200

    @app.get("/links")
    def links():
        event = event_from_source(MappingEventSource(request.args))
        return jsonify([r.as_dict() for r in generate_all(event)])

    @app.get("/links/<provider>")
    def link(provider: str):
        p = Provider.from_key(provider)
        event = event_from_source(MappingEventSource(request.args))
        return jsonify(type_key=p.value, type_name=p.display_name, url=generate(p, event))

    return app


def run_web(cfg: WebConfig):
    app = create_app()
    app.run(host=cfg.host, port=cfg.port)


def main():
    load_dotenv()
    cfg = load_web_config()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"WEB: listening on {cfg.host}:{cfg.port}")
    run_web(cfg)


if __name__ == "__main__":
    main()
