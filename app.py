"""
Philly Wings Express - site server and platform menu API
"""
from flask import Flask, request, jsonify
from flask_cors import CORS
from config import Config
from firebase_service import init_firestore
from routes.platform_menu_routes import platform_menu_bp
from routes.site_routes import site_bp
from services.menu_service import DocumentNotFound
from services.pricing import InvalidArgument
import logging
import os

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def create_app(config=None, firebase_service=None):
    """
    Create and configure Flask application

    Args:
        config: Config class or object (defaults to Config)
        firebase_service: Already-initialized FirebaseService; when None it is
            created on first use from the configuration
    """
    app = Flask(__name__)
    app.config.from_object(config or Config)

    # Enable CORS
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    state = {'firebase_service': firebase_service}

    def get_firebase_service():
        if state['firebase_service'] is None:
            state['firebase_service'] = init_firestore(
                config or Config, emulator=app.config.get('USE_EMULATOR', False)
            )
        return state['firebase_service']

    # Make service helper available to all routes
    app.get_firebase_service = get_firebase_service

    app.register_blueprint(platform_menu_bp, url_prefix='/api/platform-menu')

    # Health check endpoint
    @app.route('/api/health', methods=['GET'])
    def health_check():
        try:
            get_firebase_service()
            firebase_connected = True
        except Exception as e:
            logger.error(f"Failed to initialize Firebase: {str(e)}")
            firebase_connected = False
        return jsonify({
            'status': 'healthy',
            'firebase_connected': firebase_connected
        }), 200

    # SPA catch-all last
    app.register_blueprint(site_bp)

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Endpoint not found'}), 404
        return error.get_response()

    @app.errorhandler(InvalidArgument)
    def invalid_argument(error):
        return jsonify({'error': str(error)}), 400

    @app.errorhandler(DocumentNotFound)
    def document_not_found(error):
        return jsonify({'error': str(error)}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error'}), 500

    return app

if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', Config.PORT))
    logger.info(f"Platform Menu Manager running at http://localhost:{port}/admin/platform-menu.html")
    app.run(debug=Config.DEBUG, host='0.0.0.0', port=port)
