"""Directory bounded context — Members and the Artisans curators represent.

Source of truth for who a member is and which role they hold. Reviews and
Tips never query this context directly; they consume its events into local
rosters.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

directory = Domain(name="directory")
