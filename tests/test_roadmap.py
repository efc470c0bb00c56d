import pytest

from career_engine.models import EducationLevel
from career_engine.roadmap import (
    EDUCATION_ROADMAPS, FALLBACK_ROADMAP, education_roadmap, startup_idea,
)


def test_unknown_title_falls_back():
    roadmap = education_roadmap("Nonexistent Title", "10th")
    assert roadmap == FALLBACK_ROADMAP
    assert roadmap.stream == "Based on career choice"


def test_level_does_not_change_template():
    assert education_roadmap("Doctor", EducationLevel.TENTH) == education_roadmap("Doctor", EducationLevel.DEGREE)


@pytest.mark.parametrize("title", sorted(EDUCATION_ROADMAPS))
def test_timeline_has_five_stages(title):
    assert list(education_roadmap(title).timeline) == ["10th", "12th", "UG", "PG", "Job"]


def test_returned_roadmap_is_a_copy():
    roadmap = education_roadmap("Software Engineer")
    roadmap.pg_options.append("Something else")
    assert "Something else" not in EDUCATION_ROADMAPS["Software Engineer"].pg_options


@pytest.mark.parametrize("interests, hobbies, idea", [
    ({"Tech", "Business"}, set(), "EdTech Platform for Coding Bootcamps"),
    ({"Business"}, {"Coding"}, "EdTech Platform for Coding Bootcamps"),
    ({"Tech", "Design", "Business"}, set(), "EdTech Platform for Coding Bootcamps"),
    ({"Design", "Business"}, set(), "Custom Design Marketplace for Small Businesses"),
    ({"Tech"}, set(), "Personalized Learning Platform"),
    (set(), set(), "Personalized Learning Platform"),
])
def test_startup_idea_first_match_wins(interests, hobbies, idea):
    result = startup_idea(interests, hobbies)
    assert result.idea == idea
    assert list(result.roadmap) == ["Month 1-2", "Month 3-4", "Month 5-6"]
