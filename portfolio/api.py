"""
JSON endpoints mirroring the content files.

Each endpoint returns one document's list wrapped in a single-key object,
so front-end scripts can fetch the same data the pages are rendered from.
"""
from flask import Blueprint, current_app, jsonify

from .content import (
    EXPERIENCES_FILE,
    NAV_LINKS_FILE,
    PROJECTS_FILE,
    SKILLS_FILE,
    SOCIAL_LINKS_FILE,
    load_list,
)

api = Blueprint('api', __name__)


def _list_response(key, name):
    """Return ``{key: [...]}`` for the named document as a JSON response.

    :param key: Key to wrap the list under in the response body.
    :type key: str
    :param name: Content file to read the list from.
    :type name: str
    :returns: JSON response.
    :rtype: flask.Response
    """
    return jsonify({key: load_list(name, current_app.config['DATA_DIR'])})


@api.route('/nav-links')
def nav_links():
    return _list_response("navLinks", NAV_LINKS_FILE)


@api.route('/social-links')
def social_links():
    return _list_response("socialLinks", SOCIAL_LINKS_FILE)


@api.route('/experiences')
def experiences():
    return _list_response("jobs", EXPERIENCES_FILE)


@api.route('/projects')
def projects():
    return _list_response("projects", PROJECTS_FILE)


@api.route('/skills')
def skills():
    # Key casing matches the skills file and existing front-end fetches.
    return _list_response("Skills", SKILLS_FILE)
