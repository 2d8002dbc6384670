"""
Site Routes - prebuilt single-page app and admin pages from dist/
"""
import os
from flask import Blueprint, current_app, send_from_directory, abort

site_bp = Blueprint('site', __name__)


def _dist(*parts):
    return os.path.join(current_app.config['DIST_DIR'], *parts)


@site_bp.route('/assets/<path:filename>')
def assets(filename):
    return send_from_directory(_dist('assets'), filename)


@site_bp.route('/images/<path:filename>')
def images(filename):
    return send_from_directory(_dist('images'), filename)


@site_bp.route('/data/<path:filename>')
def data(filename):
    return send_from_directory(_dist('data'), filename)


@site_bp.route('/admin')
def admin_index():
    return send_from_directory(_dist('admin'), 'index.html')


@site_bp.route('/admin/platform-menu.html')
def admin_platform_menu():
    return send_from_directory(_dist('admin'), 'platform-menu.html')


@site_bp.route('/', defaults={'path': ''})
@site_bp.route('/<path:path>')
def spa(path):
    """Serve the main app for every other route"""
    if path.startswith('api/'):
        abort(404)
    return send_from_directory(_dist(), 'index.html')
