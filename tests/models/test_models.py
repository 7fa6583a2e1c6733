"""Tests for the pydantic models."""

import pytest
from pydantic import ValidationError

from swimlog.models import (
    STANDARD_DISTANCES,
    Stroke,
    SwimmerRef,
    Team,
    TimeEntry,
    TimeEntryCreate,
    TimeEntryUpdate,
    UserProfile,
    UserRole,
    generate_team_code,
)


class TestStroke:
    """Tests for stroke names."""

    def test_values_are_display_names(self):
        assert [s.value for s in Stroke] == [
            "Freestyle", "Backstroke", "Breaststroke", "Butterfly", "IM",
        ]

    def test_str_compares_to_value(self):
        assert Stroke.IM == "IM"

    def test_standard_distances_ascending(self):
        assert list(STANDARD_DISTANCES) == sorted(STANDARD_DISTANCES)
        assert 100 in STANDARD_DISTANCES


class TestTimeEntryCreate:
    """Tests for the insert payload."""

    def _create(self, **overrides):
        values = {
            "swimmer_id": "u1",
            "stroke": "Freestyle",
            "distance": 100,
            "time": "01:02.45",
            "test_set": "Time Trial",
        }
        values.update(overrides)
        return TimeEntryCreate(**values)

    def test_strips_required_strings(self):
        entry = self._create(stroke="  Butterfly ", test_set=" Sprint Set ")
        assert entry.stroke == "Butterfly"
        assert entry.test_set == "Sprint Set"

    @pytest.mark.parametrize("field", ["stroke", "test_set"])
    def test_blank_required_string_rejected(self, field):
        with pytest.raises(ValidationError):
            self._create(**{field: "   "})

    @pytest.mark.parametrize("distance", [0, -50])
    def test_distance_must_be_positive(self, distance):
        with pytest.raises(ValidationError):
            self._create(distance=distance)

    def test_blank_optional_fields_become_none(self):
        entry = self._create(notes="  ", team_id="")
        assert entry.notes is None
        assert entry.team_id is None


class TestTimeEntryUpdate:
    """Tests for partial updates."""

    def test_only_set_fields_dump(self):
        update = TimeEntryUpdate(time="01:00.00")
        assert update.model_dump(exclude_unset=True) == {"time": "01:00.00"}

    def test_distance_must_be_positive(self):
        with pytest.raises(ValidationError):
            TimeEntryUpdate(distance=0)

    @pytest.mark.parametrize("field", ["stroke", "distance", "time", "test_set"])
    def test_required_fields_cannot_be_cleared(self, field):
        with pytest.raises(ValidationError):
            TimeEntryUpdate(**{field: None})

    @pytest.mark.parametrize("field", ["stroke", "test_set"])
    def test_required_strings_cannot_be_blank(self, field):
        with pytest.raises(ValidationError):
            TimeEntryUpdate(**{field: "  "})

    def test_notes_can_be_cleared(self):
        assert TimeEntryUpdate(notes=None).model_dump(exclude_unset=True) == {"notes": None}

    def test_strings_are_stripped(self):
        assert TimeEntryUpdate(stroke=" Backstroke ").stroke == "Backstroke"


class TestTimeEntry:
    """Tests for stored entry helpers."""

    def test_swimmer_name_from_join(self, make_entry):
        assert make_entry("01:00.00", swimmer="Jane Smith").swimmer_name == "Jane Smith"

    def test_swimmer_name_without_join(self):
        entry = TimeEntry(
            swimmer_id="u1", stroke="Freestyle", distance=100, time="01:00.00", test_set="Set"
        )
        assert entry.swimmer_name == ""
        assert entry.recorded_on is None

    def test_event_key(self, make_entry):
        assert make_entry("00:30.00", stroke="Butterfly", distance=50).event_key == (
            "Butterfly", 50,
        )

    def test_swimmer_ref_email_optional(self):
        assert SwimmerRef(id="u1", name="John Doe").email is None


class TestTeam:
    """Tests for team join codes."""

    def test_generated_code_shape(self):
        code = generate_team_code()
        assert len(code) == 6
        assert code.isalnum()
        assert code == code.upper()

    def test_generated_code_is_accepted(self):
        team = Team(name="Sharks", team_code=generate_team_code(), coach_id="c1")
        assert len(team.team_code) == 6

    def test_code_is_uppercased(self):
        team = Team(name="Sharks", team_code=" ab12cd ", coach_id="c1")
        assert team.team_code == "AB12CD"
        assert str(team) == "Sharks"

    @pytest.mark.parametrize("code", ["ABC", "ABCDEFG", "AB-12C", ""])
    def test_bad_codes_rejected(self, code):
        with pytest.raises(ValidationError):
            Team(name="Sharks", team_code=code, coach_id="c1")


class TestUserProfile:
    """Tests for user profile roles."""

    def test_default_role_is_swimmer(self):
        profile = UserProfile(id="u1", email="swimmer@example.com", name="John Doe")
        assert profile.role == UserRole.SWIMMER
        assert profile.is_swimmer is True
        assert profile.is_coach is False

    def test_coach(self):
        profile = UserProfile(id="c1", email="coach@example.com", name="Coach", role="coach")
        assert profile.is_coach is True

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserProfile(id="u1", email="not-an-email", name="John Doe")
