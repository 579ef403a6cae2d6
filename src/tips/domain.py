"""Tips bounded context — members tipping members, curators and artisans.

A tip always lands with a member: tipping an artisan pays the artisan's
curator. Tips settle on-chain; a transaction hash marks a tip COMPLETED.
Members and artisans are known through local rosters fed by Directory
events.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

tips = Domain(name="tips")
