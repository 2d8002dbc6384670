"""
Platform Menu Routes
"""
from flask import Blueprint, request, jsonify, current_app
import logging

from services.platform_menu_service import PlatformMenuService
from services.pricing import PLATFORMS

logger = logging.getLogger(__name__)
platform_menu_bp = Blueprint('platform_menu', __name__)


def _platform_or_400(platform):
    platform = (platform or '').strip().lower()
    if platform not in PLATFORMS:
        return None, (jsonify({'error': f"Invalid platform. Use: {', '.join(PLATFORMS)}"}), 400)
    return platform, None


@platform_menu_bp.route('/<platform>', methods=['GET'])
def get_platform_menu(platform):
    """Complete menu with the platform's markup applied"""
    platform, error = _platform_or_400(platform)
    if error:
        return error

    try:
        service = PlatformMenuService(current_app.get_firebase_service())
        menu = service.get_platform_menu(platform)

        response = jsonify(menu)
        response.headers['Cache-Control'] = current_app.config['PLATFORM_MENU_CACHE_CONTROL']
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response, 200

    except Exception as e:
        # The platform is already validated; what is left is bad stored data or a store failure
        logger.error(f"Error generating platform menu: {str(e)}")
        return jsonify({'error': 'Internal server error'}), 500


@platform_menu_bp.route('/<platform>/publish', methods=['POST'])
def publish_platform_menu(platform):
    """Record a published menu snapshot"""
    platform, error = _platform_or_400(platform)
    if error:
        return error

    try:
        data = request.get_json(silent=True) or {}
        snapshot = data.get('snapshot')
        if snapshot is not None and not isinstance(snapshot, dict):
            return jsonify({'error': 'snapshot must be an object'}), 400

        service = PlatformMenuService(current_app.get_firebase_service())
        published = service.publish(platform, snapshot)

        return jsonify({
            'success': True,
            'message': f"Menu published successfully for {platform}",
            **published
        }), 201

    except Exception as e:
        logger.error(f"Error publishing menu: {str(e)}")
        return jsonify({'error': 'Failed to publish menu'}), 500
