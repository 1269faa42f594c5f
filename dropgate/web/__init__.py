from flask import Flask
from flask_babel import Babel  # type: ignore

from dropgate.web import config


webapp = Flask(__name__)
webapp.config.from_object(config)


def get_locale() -> str:
    locale = webapp.config['LOCALE']
    if locale in webapp.config['LANGUAGES']:
        return locale
    return 'en'


# Localizing configurations
babel = Babel(webapp, locale_selector=get_locale)


# Must import files after app's creation
from dropgate.web import views  # NOQA: F401, E402, I202


# gunicorn search for application
application = webapp
