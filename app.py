import sys

from flask import Flask, jsonify # The main Flask class and JSON responses.
from config import Config # Import the application's configuration class.
from extensions import catalog, CatalogLoadError # Import initialized extensions.


# Application Factory Function
def create_app(config_class=Config):
    """
    Application factory for creating and configuring the Flask app.
    Tests pass their own Config subclass (e.g. with temporary data paths).

    Args:
        config_class (type, optional): Configuration object to load. Defaults to config.Config.

    Returns:
        flask.Flask: The configured application.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration from the given Config object (see config.py).
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # --- Initialize Flask Extensions ---
    # The catalog extension reads providers.json/plans.json on first use.
    catalog.init_app(app)

    # --- Error Handlers ---
    @app.errorhandler(CatalogLoadError)
    def catalog_unavailable(error):
        # The message was already logged by the extension.
        return jsonify({"error": f"Provider catalog unavailable: {error}"}), 503

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    # --- Import and Register Blueprints ---
    from routes.providers import providers_bp
    app.register_blueprint(providers_bp) # Serves /providers and /<lang>/providers.

    # --- CLI Commands ---
    @app.cli.command('validate-plans')
    def validate_plans_command():
        """Validate the configured providers.json and plans.json."""
        from scripts.validate_plans import run_validation
        sys.exit(run_validation(app.config['PROVIDERS_JSON_PATH'], app.config['PLANS_JSON_PATH']))

    return app # Return the configured Flask app instance.

# This block allows running the Flask development server directly using `python app.py`.
if __name__ == '__main__':
    app = create_app() # Create an app instance using the factory.
    app.run(debug=True)
