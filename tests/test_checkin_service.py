"""Tests for toggling check-ins and keeping streaks in step with them."""

from __future__ import annotations

from datetime import date

import pytest


class TestToggle:
    """Tests for CheckinService.toggle."""

    def test_completion_writes_checkin_and_streak(self, checkin_service, checkins, user, jan):
        result = checkin_service.toggle(user.id, "physical", True, on=jan(1), mood=4, notes="run")

        assert result.action == "completed"
        assert result.checkin.mood == 4
        assert result.checkin.notes == "run"
        assert result.streak.current_streak == 1
        assert checkins.get(user.id, result.checkin.category_id, jan(1)) is not None

    def test_category_by_id_or_slug(self, checkin_service, user, categories, jan):
        mental = categories.get_by_slug("mental")

        by_id = checkin_service.toggle(user.id, mental.id, True, on=jan(1))
        by_digits = checkin_service.toggle(user.id, str(mental.id), True, on=jan(2))
        by_slug = checkin_service.toggle(user.id, " Mental ", True, on=jan(3))

        assert by_id.streak.category_id == mental.id
        assert by_digits.streak.current_streak == 2
        assert by_slug.streak.current_streak == 3

    def test_recompleting_same_day_updates_checkin_only(self, checkin_service, checkins, user, jan):
        checkin_service.toggle(user.id, "social", True, on=jan(5), mood=2)

        result = checkin_service.toggle(user.id, "social", True, on=jan(5), mood=5)

        assert result.checkin.mood == 5
        assert result.streak.current_streak == 1
        assert len(checkins.list_for_user(user.id)) == 1

    def test_unmark_removes_checkin_and_zeroes_streak(self, checkin_service, checkins, user, jan):
        checkin_service.toggle(user.id, "spiritual", True, on=jan(1))
        checkin_service.toggle(user.id, "spiritual", True, on=jan(2))

        result = checkin_service.toggle(user.id, "spiritual", False, on=jan(2))

        assert result.action == "removed"
        assert result.checkin is None
        assert result.streak.current_streak == 0
        assert result.streak.longest_streak == 2
        assert [c.completed_at for c in checkins.list_for_user(user.id)] == [jan(1)]

    def test_unmark_first_time_creates_nothing(self, checkin_service, streaks, jan):
        result = checkin_service.toggle("newcomer", "material", False, on=jan(1))

        assert result.streak is None
        assert streaks.list_for_user("newcomer") == []

    def test_creates_profile_on_first_toggle(self, checkin_service, profiles, categories, jan):
        checkin_service.toggle("fresh-user", "physical", True, on=jan(1))

        assert profiles.get("fresh-user") is not None

    def test_unmark_leaves_unknown_user_without_profile(self, checkin_service, profiles, jan):
        checkin_service.toggle("passer-by", "physical", False, on=jan(1))

        assert profiles.get("passer-by") is None

    @pytest.mark.parametrize("mood", [0, 6, -1])
    def test_rejects_mood_out_of_range(self, checkin_service, user, mood):
        with pytest.raises(ValueError, match="Mood"):
            checkin_service.toggle(user.id, "physical", True, mood=mood)

    @pytest.mark.parametrize("category", ["cosmic", 99, "0"])
    def test_rejects_unknown_category(self, checkin_service, user, category):
        with pytest.raises(ValueError, match="Unknown category"):
            checkin_service.toggle(user.id, category, True)

    def test_defaults_to_today(self, checkin_service, user):
        result = checkin_service.toggle(user.id, "emotional", True)

        assert result.checkin.completed_at == date.today()


class TestRemove:
    """Tests for deleting one specific day."""

    def test_remove_existing_day(self, checkin_service, user, jan):
        checkin_service.toggle(user.id, "physical", True, on=jan(1))
        checkin_service.toggle(user.id, "physical", True, on=jan(2))

        streak = checkin_service.remove(user.id, "physical", jan(2))

        assert streak.current_streak == 0
        assert streak.longest_streak == 2

    def test_remove_missing_day_raises(self, checkin_service, user, jan):
        with pytest.raises(LookupError):
            checkin_service.remove(user.id, "physical", jan(1))


class TestRecalculate:
    """Tests for rebuilding streaks from the check-in store."""

    def test_backfilled_day_is_picked_up(self, checkin_service, user, jan):
        checkin_service.toggle(user.id, "mental", True, on=jan(1))
        checkin_service.toggle(user.id, "mental", True, on=jan(3))
        # Filling in the missed day is accepted but does not stitch the run.
        backfill = checkin_service.toggle(user.id, "mental", True, on=jan(2))
        assert backfill.streak.current_streak == 1

        rebuilt = checkin_service.recalculate(user.id, "mental")

        assert rebuilt.current_streak == 3
        assert rebuilt.longest_streak == 3

    def test_recalculate_all_skips_untouched_categories(self, checkin_service, user, jan):
        checkin_service.toggle(user.id, "physical", True, on=jan(1))
        checkin_service.toggle(user.id, "social", True, on=jan(1))

        rebuilt = checkin_service.recalculate_all(user.id)

        assert len(rebuilt) == 2
        assert all(streak.current_streak == 1 for streak in rebuilt)
