"""Tests for the filter composer.

Properties:
1. Search is case-insensitive substring match on name/title
2. Blank filter values mean no constraint
3. Field filters AND with search
4. Video model filter is "at least one linked model"
"""

from datetime import datetime

from conftest import add_models, add_video

from mediadesk.db import repo
from mediadesk.listing.filters import (
    ModelFilter,
    VideoFilter,
    escape_like,
    matches_model,
    matches_video,
    model_conditions,
    video_conditions,
)
from mediadesk.listing.paging import Page
from mediadesk.models.domain import ModelEntity, VideoEntity

ALL = Page(skip=0, take=100)
NOW = datetime(2024, 1, 1)


def _model(name, ethnicity=None):
    return ModelEntity(id=name, name=name, ethnicity=ethnicity, created_at=NOW, updated_at=NOW)


def _video(title, model_ids=()):
    return VideoEntity(
        id=title,
        title=title,
        url="https://x/v.mp4",
        views=0,
        uploaded_at=NOW,
        created_at=NOW,
        updated_at=NOW,
        models=[_model(m) for m in model_ids],
    )


class TestFromParams:
    """Query parameters -> filter objects."""

    def test_missing_params_mean_no_constraint(self):
        assert ModelFilter.from_params(None, None) == ModelFilter()
        assert VideoFilter.from_params(None, None) == VideoFilter()

    def test_blank_field_filter_is_dropped(self):
        assert ModelFilter.from_params("a", "  ").ethnicity is None
        assert VideoFilter.from_params("a", "").model_id is None

    def test_no_conditions_without_filters(self):
        assert model_conditions(ModelFilter()) == []
        assert video_conditions(VideoFilter()) == []

    def test_one_condition_per_active_filter(self):
        assert len(model_conditions(ModelFilter(search="a", ethnicity="Asian"))) == 2
        assert len(video_conditions(VideoFilter(search="a", model_id="m1"))) == 2


class TestEscapeLike:
    """LIKE wildcards in user text are literal."""

    def test_escapes_wildcards(self):
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_escapes_escape_char(self):
        assert escape_like("a\\b") == "a\\\\b"


class TestInMemoryMatchers:
    """Pure-Python matchers follow the same rules as the store query."""

    def test_empty_search_matches_everything(self):
        assert matches_model(_model("Ava"), ModelFilter())
        assert matches_video(_video("Clip"), VideoFilter())

    def test_search_is_case_insensitive(self):
        assert matches_model(_model("Ava Rose"), ModelFilter(search="ROSE"))
        assert not matches_model(_model("Ava Rose"), ModelFilter(search="lily"))

    def test_ethnicity_is_exact(self):
        assert matches_model(_model("Ava", "Asian"), ModelFilter(ethnicity="Asian"))
        assert not matches_model(_model("Ava", "asian"), ModelFilter(ethnicity="Asian"))
        assert not matches_model(_model("Ava"), ModelFilter(ethnicity="Asian"))

    def test_model_filter_needs_one_linked_model(self):
        video = _video("Clip", model_ids=("m1", "m2"))
        assert matches_video(video, VideoFilter(model_id="m2"))
        assert not matches_video(video, VideoFilter(model_id="m3"))


class TestStoreModelFilters:
    """Filters applied through repo.list_models."""

    def test_search_matches_substring_any_case(self, session):
        add_models(session, "Ava Rose", "Bea", "ROSALIND")

        models, total = repo.list_models(session, ModelFilter(search="ros"), ALL)

        assert total == 2
        assert {m.name for m in models} == {"Ava Rose", "ROSALIND"}

    def test_every_result_contains_search(self, session):
        add_models(session, "Ann", "Anna", "Joanne", "Bob", "Hannah")

        for search in ("an", "AN", "n", "bob", "zz", ""):
            models, total = repo.list_models(session, ModelFilter(search=search), ALL)
            assert all(search.lower() in m.name.lower() for m in models)
            assert total == len(models)

    def test_search_folds_non_ascii_case(self, session):
        add_models(session, "Élodie", "Zoë", "Eloise")

        models, total = repo.list_models(session, ModelFilter(search="élo"), ALL)
        upper, _ = repo.list_models(session, ModelFilter(search="ZOË"), ALL)

        assert [m.name for m in models] == ["Élodie"]
        assert total == 1
        assert all(matches_model(m, ModelFilter(search="élo")) for m in models)
        assert [m.name for m in upper] == ["Zoë"]

    def test_wildcards_are_literal(self, session):
        add_models(session, "100% Real", "100 Real")

        models, _ = repo.list_models(session, ModelFilter(search="%"), ALL)

        assert [m.name for m in models] == ["100% Real"]

    def test_ethnicity_and_search_are_conjunctive(self, session):
        add_models(session, "Ava", "Amy", ethnicity="Asian")
        add_models(session, "Ana", "Bo", ethnicity="Latina")

        search_only, search_total = repo.list_models(session, ModelFilter(search="a"), ALL)
        both, both_total = repo.list_models(
            session, ModelFilter(search="a", ethnicity="Asian"), ALL
        )

        assert {m.name for m in both} == {"Ava", "Amy"}
        assert {m.id for m in both} < {m.id for m in search_only}
        assert both_total < search_total


class TestStoreVideoFilters:
    """Filters applied through repo.list_videos."""

    def test_filter_by_model(self, session):
        m1, m2 = add_models(session, "Ava", "Bea")
        add_video(session, "Solo", model_ids=[m1], minutes=1)
        add_video(session, "Duo", model_ids=[m1, m2], minutes=2)
        add_video(session, "Other", model_ids=[m2], minutes=3)

        videos, total = repo.list_videos(session, VideoFilter(model_id=m1), ALL)

        assert total == 2
        assert {v.title for v in videos} == {"Solo", "Duo"}

    def test_model_filter_with_search(self, session):
        (m1,) = add_models(session, "Ava")
        add_video(session, "Beach day", model_ids=[m1], minutes=1)
        add_video(session, "Studio", model_ids=[m1], minutes=2)
        add_video(session, "Beach night", minutes=3)

        videos, total = repo.list_videos(session, VideoFilter(search="BEACH", model_id=m1), ALL)

        assert total == 1
        assert [v.title for v in videos] == ["Beach day"]

    def test_unknown_model_matches_nothing(self, session):
        add_video(session, "Clip")

        videos, total = repo.list_videos(session, VideoFilter(model_id="missing"), ALL)

        assert videos == []
        assert total == 0
