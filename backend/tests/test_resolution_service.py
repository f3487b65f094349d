"""Tests for resolve-or-create of categories, products and tags."""

import pytest

from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.models import Category, Product, Tag, User
from finance_tracker.services.resolution_service import (
    ById,
    ByName,
    reference_from,
    resolve_category,
    resolve_product,
    resolve_tag,
    resolve_tags,
)


@pytest.fixture
def other_user(db_session):
    user = User(email="dave@example.com", password_hash="x")
    db_session.add(user)
    db_session.commit()
    return user


class TestReferenceFrom:
    """Building references from optional id/name pairs."""

    def test_id_wins_over_name(self):
        assert reference_from(3, "Milk") == ById(3)

    def test_name_is_trimmed(self):
        assert reference_from(None, "  Milk ") == ByName("Milk")

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_nothing_to_resolve(self, name):
        assert reference_from(None, name) is None


class TestResolve:
    """Find-or-create behaviour."""

    def test_none_resolves_to_none(self, db_session, sample_user):
        assert resolve_category(db_session, sample_user.id, None) is None

    def test_name_creates_then_reuses(self, db_session, sample_user):
        first = resolve_product(db_session, sample_user.id, ByName("Milk"))
        second = resolve_product(db_session, sample_user.id, ByName("Milk"))
        assert first == second
        assert db_session.query(Product).count() == 1

    def test_name_match_is_exact(self, db_session, sample_user):
        first = resolve_tag(db_session, sample_user.id, ByName("Food"))
        second = resolve_tag(db_session, sample_user.id, ByName("food"))
        assert first != second

    def test_created_category_is_top_level(self, db_session, sample_user):
        category_id = resolve_category(db_session, sample_user.id, ByName("Dairy"))
        assert db_session.get(Category, category_id).parent_category_id is None

    def test_names_are_per_user(self, db_session, sample_user, other_user):
        mine = resolve_tag(db_session, sample_user.id, ByName("food"))
        theirs = resolve_tag(db_session, other_user.id, ByName("food"))
        assert mine != theirs
        assert db_session.query(Tag).count() == 2

    def test_id_must_belong_to_user(self, db_session, sample_category, other_user):
        assert resolve_category(db_session, sample_category.user_id, ById(sample_category.id)) == sample_category.id
        with pytest.raises(NotFoundError):
            resolve_category(db_session, other_user.id, ById(sample_category.id))

    def test_resolve_tags_deduplicates_in_order(self, db_session, sample_user):
        ids = resolve_tags(db_session, sample_user.id, ["b", "a", "b", "  ", "a"])
        names = [db_session.get(Tag, tag_id).name for tag_id in ids]
        assert names == ["b", "a"]

    def test_existing_product_is_found_by_name(self, db_session, sample_product):
        found = resolve_product(db_session, sample_product.user_id, ByName("Milk"))
        assert found == sample_product.id
        assert db_session.query(Product).count() == 1
