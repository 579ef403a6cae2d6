"""Reviews bounded context — curator reviews, moderation and abuse reports.

Members review curators, optionally about one of the curator's artisans.
Administrators moderate reviews and resolve reports; a report resolved with
action taken rejects the reviewed content. Approved reviews feed the rating
aggregation and can be answered once by the reviewed curator.

Who is a curator, and which artisans belong to whom, is learned from the
Directory domain's events and kept in local rosters.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
