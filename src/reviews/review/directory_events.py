"""Inbound cross-domain event handlers — Reviews reacts to Directory events.

Keeps the MemberRoster and ArtisanRoster projections current so that
submission can check "is the target a curator" and "does the artisan belong
to the target" locally.

Cross-domain events are imported from shared.events.directory and registered
as external events via reviews.register_external_event().
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.directory import ArtisanRegistered, MemberRegistered, MemberRoleChanged

from reviews.domain import reviews
from reviews.projections.artisan_roster import ArtisanRoster
from reviews.projections.member_roster import MemberRoster
from reviews.review.review import Review

logger = structlog.get_logger(__name__)

reviews.register_external_event(MemberRegistered, "Directory.MemberRegistered.v1")
reviews.register_external_event(MemberRoleChanged, "Directory.MemberRoleChanged.v1")
reviews.register_external_event(ArtisanRegistered, "Directory.ArtisanRegistered.v1")


@reviews.event_handler(part_of=Review, stream_category="directory::member")
class MemberEventsHandler:
    @handle(MemberRegistered)
    def on_member_registered(self, event: MemberRegistered) -> None:
        current_domain.repository_for(MemberRoster).add(
            MemberRoster(
                member_id=str(event.member_id),
                first_name=event.first_name,
                last_name=event.last_name,
                role=event.role,
                registered_at=event.registered_at,
                updated_at=event.registered_at,
            )
        )

    @handle(MemberRoleChanged)
    def on_member_role_changed(self, event: MemberRoleChanged) -> None:
        repo = current_domain.repository_for(MemberRoster)
        try:
            member = repo.get(str(event.member_id))
        except ObjectNotFoundError:
            logger.warning(
                "Role change for unknown member, skipping",
                member_id=str(event.member_id),
                role=event.role,
            )
            return

        member.role = event.role
        member.updated_at = event.changed_at
        repo.add(member)


@reviews.event_handler(part_of=Review, stream_category="directory::artisan")
class ArtisanEventsHandler:
    @handle(ArtisanRegistered)
    def on_artisan_registered(self, event: ArtisanRegistered) -> None:
        current_domain.repository_for(ArtisanRoster).add(
            ArtisanRoster(
                artisan_id=str(event.artisan_id),
                curator_id=str(event.curator_id),
                name=event.name,
                registered_at=event.registered_at,
            )
        )
