from dataclasses import dataclass, field
from typing import List, Optional

from flask import Blueprint, current_app, render_template, request

from displayspec.errors import InvalidInput, UpstreamUnavailable
from displayspec.models import NotchType, PhoneLookup, SearchCandidate
from displayspec.scrapers.lookup import lookup_options, lookup_phone, search_phones

bp = Blueprint('main', __name__)


@dataclass
class LookupView:
    """Everything the lookup page shows, built fresh for each request."""
    query: str = ''
    results: List[SearchCandidate] = field(default_factory=list)
    selected: Optional[PhoneLookup] = None
    notch_override: Optional[NotchType] = None
    message: str = ''
    error: str = ''

    @property
    def notch(self) -> Optional[NotchType]:
        """Notch shown on the card: the user's pick, else the detected one."""
        if self.notch_override:
            return self.notch_override
        return self.selected.notch if self.selected else None

    @property
    def notch_types(self) -> list:
        return list(NotchType)


@bp.route('/')
def index():
    """Search form and result list."""
    view = LookupView(query=request.args.get('q', '').strip())

    if 'q' in request.args:
        try:
            view.results = search_phones(view.query, **lookup_options(current_app.config))
            if not view.results:
                view.message = 'No phones found. Try a different search term.'
        except InvalidInput:
            view.error = 'Enter a phone name to search.'
        except UpstreamUnavailable:
            view.error = 'Failed to search. Please try again.'

    return render_template('lookup/index.html', view=view)


@bp.route('/phone/<slug>')
def phone(slug):
    """Spec card for one phone, with an optional notch override (?notch=pill)."""
    view = LookupView(query=request.args.get('q', '').strip())
    view.notch_override = NotchType.from_value(request.args.get('notch'))

    try:
        view.selected = lookup_phone(slug, **lookup_options(current_app.config))
    except InvalidInput:
        view.error = 'No phone selected.'
    except UpstreamUnavailable:
        view.error = 'Failed to get phone details. Please try again.'

    return render_template('lookup/index.html', view=view, slug=slug)
