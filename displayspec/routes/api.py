from flask import Blueprint, current_app, jsonify, request

from displayspec.errors import InvalidInput, UpstreamUnavailable
from displayspec.models import NotchType
from displayspec.notch import classify
from displayspec.scrapers.lookup import lookup_options, lookup_phone, search_phones

bp = Blueprint('api', __name__)

NO_RESULTS_MESSAGE = 'No phones found. Try a different search term.'


@bp.errorhandler(InvalidInput)
def invalid_input(e):
    return jsonify({'error': e.message}), e.status_code


@bp.route('/search')
def search():
    """
    Search GSMArena by phone name.
    An empty result is a normal response with a message, not an error.
    """
    query = request.args.get('q', '')

    try:
        results = search_phones(query, **lookup_options(current_app.config))
    except UpstreamUnavailable:
        return jsonify({'error': 'Failed to search GSMArena. Please try again.'}), 502

    if not results:
        return jsonify({'results': [], 'message': NO_RESULTS_MESSAGE})

    return jsonify({'results': [r.to_dict() for r in results]})


@bp.route('/phone')
def phone():
    """Display specs and detected notch type for one phone slug."""
    slug = request.args.get('slug', '')

    try:
        result = lookup_phone(slug, **lookup_options(current_app.config))
    except UpstreamUnavailable:
        return jsonify({'error': 'Failed to get phone details. Please try again.'}), 502

    return jsonify(result.to_dict())


@bp.route('/notch')
def notch():
    """Classify a free-text phone name without scraping anything."""
    name = request.args.get('name', '').strip()
    if not name:
        raise InvalidInput('No phone name provided')

    return jsonify(classify(name).to_dict())


@bp.route('/notch-types')
def notch_types():
    return jsonify([t.to_dict() for t in NotchType])
