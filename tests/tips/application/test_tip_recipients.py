import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from tips.tip.recipients import Recipient, TipRecipientResolver, TipTarget

resolver = TipRecipientResolver()


@pytest.fixture(autouse=True)
def _community(community):
    yield


class TestMemberRecipient:
    def test_member(self):
        assert resolver.resolve("member-001", TipTarget.MEMBER, "member-002") == Recipient("member-002")

    def test_unknown_member(self):
        with pytest.raises(ObjectNotFoundError):
            resolver.resolve("member-001", TipTarget.MEMBER, "ghost")

    def test_unknown_artisan(self):
        with pytest.raises(ObjectNotFoundError):
            resolver.resolve("member-001", TipTarget.MEMBER, "curator-001", artisan_id="artisan-404")


class TestCuratorRecipient:
    def test_curator_with_own_artisan(self):
        recipient = resolver.resolve("member-001", TipTarget.CURATOR, "curator-001", artisan_id="artisan-001")
        assert recipient == Recipient("curator-001", "artisan-001")

    def test_plain_member_is_not_a_curator(self):
        with pytest.raises(ObjectNotFoundError):
            resolver.resolve("member-001", TipTarget.CURATOR, "member-002")

    def test_artisan_of_another_curator(self):
        with pytest.raises(ObjectNotFoundError):
            resolver.resolve("member-001", TipTarget.CURATOR, "curator-001", artisan_id="artisan-002")


class TestArtisanRecipient:
    def test_curator_receives_for_artisan(self):
        recipient = resolver.resolve("member-001", TipTarget.ARTISAN, "artisan-002")
        assert recipient == Recipient("curator-002", "artisan-002")

    def test_curator_cannot_tip_own_artisan(self):
        with pytest.raises(ValidationError):
            resolver.resolve("curator-001", TipTarget.ARTISAN, "artisan-001")

    def test_unknown_artisan(self):
        with pytest.raises(ObjectNotFoundError):
            resolver.resolve("member-001", TipTarget.ARTISAN, "artisan-404")


def test_unknown_target_type():
    with pytest.raises(ValidationError):
        resolver.resolve("member-001", "WALLET", "member-002")
