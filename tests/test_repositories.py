from shopapi.core.security import hash_password
from shopapi.models import CartItem, Member, PreferenceItem, Review
from shopapi.repositories.item_repository import ItemRepository
from shopapi.repositories.member_repository import MemberRepository


def _create_member(db_session):
    repo = MemberRepository(db_session)
    return repo.create_member(
        email="a@b.com",
        password_hash=hash_password("asdfasdf@1"),
        name="tester",
        phone="01011112222",
        birth="2000/03/27",
    )


def test_member_lookups(db_session):
    repo = MemberRepository(db_session)
    member = _create_member(db_session)

    assert repo.get_by_email("a@b.com").id == member.id
    assert repo.get_by_name_and_phone("tester", "01011112222").id == member.id
    assert repo.get_by_name_and_phone("tester", "01099999999") is None
    assert repo.get_by_email_and_name_and_phone("a@b.com", "tester", "01011112222").id == member.id
    assert repo.get_by_email_and_name_and_phone("a@b.com", "other", "01011112222") is None


def test_change_point_applies_signed_delta(db_session):
    repo = MemberRepository(db_session)
    member = _create_member(db_session)

    assert repo.change_point(member.id, 500) == 500
    assert repo.change_point(member.id, -200) == 300
    assert repo.get_by_id(member.id).point == 300


def test_change_point_never_goes_negative(db_session):
    repo = MemberRepository(db_session)
    member = _create_member(db_session)
    repo.change_point(member.id, 100)

    assert repo.change_point(member.id, -101) is None
    assert repo.get_by_id(member.id).point == 100


def test_adjust_preference_count_is_floored_at_zero(db_session, make_item):
    repo = ItemRepository(db_session)
    item = make_item()

    assert repo.adjust_preference_count(item.id, 1) is True
    assert repo.adjust_preference_count(item.id, -1) is True
    assert repo.adjust_preference_count(item.id, -1) is False
    assert repo.get_by_id(item.id).preference_count == 0


def test_deleting_member_cascades_to_owned_rows(db_session, make_item):
    member = _create_member(db_session)
    item = make_item()
    db_session.add_all([
        PreferenceItem(member_id=member.id, item_id=item.id),
        CartItem(member_id=member.id, item_id=item.id, quantity=2),
        Review(member_id=member.id, item_id=item.id, rating=5, content="good"),
    ])
    db_session.commit()

    db_session.delete(db_session.get(Member, member.id))
    db_session.commit()

    assert db_session.query(PreferenceItem).count() == 0
    assert db_session.query(CartItem).count() == 0
    assert db_session.query(Review).count() == 0
