"""Unit tests for the Wish aggregate."""

import pytest

from wishes.domain.error import InvariantViolation, SelfSupportError, ValidationError
from wishes.domain.model import ANONYMOUS_NAME, Wish
from wishes.domain.value import SupportCount
from tests.factories import make_wish, session_identity, user_identity


class TestCreateWish:
    """Tests for Wish.create."""

    def test_create_sets_defaults(self):
        """A new wish has no supporters and a fresh ID."""
        author = session_identity("s1")

        wish = Wish.create("  World peace ", "Alice", author=author)

        assert wish.content.value == "World peace"
        assert wish.name.value == "Alice"
        assert wish.author_id == author
        assert wish.support_count.value == 0
        assert wish.supporters == frozenset()
        assert wish.created_at.tzinfo is not None

    def test_blank_name_means_anonymous(self):
        """Blank or missing names display as anonymous."""
        assert make_wish(name=None).display_name == ANONYMOUS_NAME
        assert make_wish(name="   ").name is None

    def test_rejects_empty_content(self):
        with pytest.raises(ValidationError):
            Wish.create("   ", "Alice", author=session_identity())

    def test_count_must_match_supporters(self):
        """Constructing a wish with an inconsistent count fails."""
        wish = make_wish()

        with pytest.raises(InvariantViolation):
            Wish(
                id=wish.id,
                content=wish.content,
                author_id=wish.author_id,
                support_count=SupportCount(2),
                supporters=frozenset({session_identity("other")}),
            )

    def test_author_cannot_be_a_supporter(self):
        wish = make_wish(author=session_identity("s1"))

        with pytest.raises(InvariantViolation):
            Wish(
                id=wish.id,
                content=wish.content,
                author_id=wish.author_id,
                support_count=SupportCount(1),
                supporters=frozenset({session_identity("s1")}),
            )


class TestUpdateWish:
    """Tests for Wish.update."""

    def test_update_preserves_identity_and_supporters(self):
        """Editing keeps the ID, author, creation time and supporters."""
        wish = make_wish(author=session_identity("s1")).add_supporter(
            session_identity("s2")
        )

        updated = wish.update("Bob", "Clean oceans")

        assert updated.id == wish.id
        assert updated.author_id == wish.author_id
        assert updated.created_at == wish.created_at
        assert updated.supporters == wish.supporters
        assert updated.content.value == "Clean oceans"
        assert updated.name.value == "Bob"

    def test_update_rejects_empty_content(self):
        with pytest.raises(ValidationError):
            make_wish().update("Alice", "")


class TestSupporters:
    """Tests for support rules on the aggregate."""

    def test_author_cannot_support_own_wish(self):
        author = user_identity(1)
        wish = make_wish(author=author)

        validation = wish.can_support(author)

        assert validation.is_valid is False
        assert validation.error_code == "SELF_SUPPORT_NOT_ALLOWED"
        with pytest.raises(SelfSupportError):
            wish.add_supporter(author)

    def test_add_supporter_is_idempotent(self):
        supporter = session_identity("s2")
        wish = make_wish(author=session_identity("s1"))

        once = wish.add_supporter(supporter)
        twice = once.add_supporter(supporter)

        assert twice.support_count.value == 1
        assert twice.is_supported_by(supporter)

    def test_remove_supporter_keeps_count_consistent(self):
        supporter = session_identity("s2")
        wish = make_wish(author=session_identity("s1")).add_supporter(supporter)

        removed = wish.remove_supporter(supporter).remove_supporter(supporter)

        assert removed.support_count.value == 0
        assert not removed.is_supported_by(supporter)
