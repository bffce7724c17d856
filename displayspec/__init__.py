import os
from flask import Flask

from displayspec.scrapers.fetch import REQUEST_TIMEOUT
from displayspec.scrapers.lookup import GSMARENA_BASE_URL


def create_app(config=None):
    app = Flask(__name__)
    
    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key')
    app.config['GSMARENA_BASE_URL'] = GSMARENA_BASE_URL
    app.config['LOOKUP_TIMEOUT'] = REQUEST_TIMEOUT
    app.json.sort_keys = False
    if config:
        app.config.update(config)
    
    # Register blueprints
    from displayspec.routes import main, api
    app.register_blueprint(main.bp)
    app.register_blueprint(api.bp, url_prefix='/api')
    
    return app
