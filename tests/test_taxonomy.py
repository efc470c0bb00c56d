import pytest

from career_engine.taxonomy import (
    CAREER_SKILLS, SKILL_KEYWORDS, SKILL_RESOURCE_LINKS, TAG_SKILLS, get_skill, learning_links, skill_link,
)


def test_known_skill_link():
    assert skill_link("Python") == "https://www.google.com/search?q=learn+python+for+beginners"


def test_unknown_skill_gets_search_link():
    assert skill_link("Git") == "https://www.google.com/search?q=Git+course+for+beginners"


def test_learning_links_are_url_encoded():
    links = learning_links("UI/UX Design")
    assert set(links) == {"nptel", "youtube", "coursera", "udemy"}
    assert links["coursera"] == "https://www.coursera.org/search?query=UI%2FUX%20Design"


def test_get_skill_collects_all_locators():
    skill = get_skill("Figma")
    assert skill.name == "Figma"
    assert skill.links[0] == SKILL_RESOURCE_LINKS["Figma"]
    assert len(skill.links) == 5


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        TAG_SKILLS["Music"] = ("Rhythm",)
    assert isinstance(SKILL_KEYWORDS["C Programming"], tuple)


def test_career_skills_have_no_duplicates():
    for title, skills in CAREER_SKILLS.items():
        assert len(skills) == len(set(skills)), title
