import logging

from flask import Flask, request
from flask_babel import Babel
from flask_mail import Mail
from gevent.pywsgi import WSGIServer

from golfoutings.config import ConfigType
from golfoutings.constants import LANGUAGES
from golfoutings.lib.args import config_overrides, parse_golfoutings_args
from golfoutings.lib.current_app import is_admin
from golfoutings.lib.events import EventSystem
from golfoutings.lib.logger import configure_logger
from golfoutings.lib.notification_gateway import NotificationGateway
from golfoutings.lib.outing_manager import OutingManager
from golfoutings.lib.record_store import RecordStore
from golfoutings.lib.session_auth import SessionAuthorizer
from golfoutings.lib.utils import format_date
from golfoutings.routes.admin import admin_bp
from golfoutings.routes.auth import auth_bp
from golfoutings.routes.home import home_bp
from golfoutings.routes.signup import signup_bp


def get_locale():
    """Select the language to display the webpage in based on the Accept-Language header"""
    return request.accept_languages.best_match(LANGUAGES.keys()) or "en"


def create_app(
    config_type: ConfigType = ConfigType.PRODUCTION,
    store: RecordStore | None = None,
    mail: Mail | None = None,
    **overrides,
) -> Flask:
    """Build the Flask app with its store, mail gateway and admin gate wired in.

    Args:
        config_type: Configuration profile to load.
        store: Record store to use. Defaults to one at the configured DB_FILE.
        mail: Mail transport. Defaults to Flask-Mail configured from MAIL_* settings.
        **overrides: Config keys that take precedence over the profile.
    """
    app = Flask(__name__)
    app.config.from_object(config_type.value)
    app.config.update(overrides)

    Babel(app, locale_selector=get_locale)

    app.register_blueprint(home_bp)
    app.register_blueprint(signup_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)

    # Expose some functions to jinja templates
    app.jinja_env.globals.update(format_date=format_date, site_title=app.config["SITE_NAME"])
    app.context_processor(lambda: {"admin": is_admin()})

    if store is None:
        store = RecordStore(app.config["DB_FILE"])
    store.initialize()

    gateway = NotificationGateway(app, mail=mail)

    # expose shared services to the flask app
    app.store = store
    app.outing_manager = OutingManager(store, gateway, EventSystem())
    app.authorizer = SessionAuthorizer(app.config["ADMIN_USER"], app.config["ADMIN_PASS"])

    return app


def main():
    args = parse_golfoutings_args()
    configure_logger(log_level=args.log_level, log_dir=args.log_dir)

    app = create_app(ConfigType[args.config.upper()], **config_overrides(args))
    port = int(app.config["PORT"])

    server = WSGIServer(("0.0.0.0", port), app, log=None, error_log=logging.getLogger())
    logging.info(f"Server is running at http://localhost:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logging.info("Shutting down")
        server.stop()


if __name__ == "__main__":
    main()
