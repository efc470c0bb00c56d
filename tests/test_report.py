import itertools

import orjson

from career_engine.report import (
    GENERAL_TEMPLATE, build_course_list, build_quiz_report, build_report,
    build_resume_report, choose_template, serialize_report,
)
from career_engine.roadmap import education_roadmap
from career_engine.taxonomy import skill_link

SUBJECTS = ["Math", "Science", "Biology", "Commerce", "Arts", "Computers"]
INTERESTS = ["Tech", "Design", "Business", "People", "Research", "Teaching"]
HOBBIES = ["Coding", "Drawing", "Speaking", "Sports"]


def _subsets(items, size):
    return [set(c) for c in itertools.combinations(items, size)]


def _answer_grid(make_answers):
    for subjects in _subsets(SUBJECTS, 2)[:6]:
        for interests in _subsets(INTERESTS, 2) + _subsets(INTERESTS, 4):
            for hobbies in [set()] + _subsets(HOBBIES, 2):
                yield make_answers(subjects=subjects, interests=interests, hobbies=hobbies)


def test_report_is_deterministic(make_answers):
    answers = make_answers(subjects={"Math", "Biology"}, interests={"Tech", "Research", "People"})
    first = [s.model_dump_json() for s in build_report(answers)]
    second = [s.model_dump_json() for s in build_report(answers)]
    assert first == second


def test_cap_and_gap_partition(make_answers):
    for answers in _answer_grid(make_answers):
        suggestions = build_report(answers)
        assert 1 <= len(suggestions) <= 4
        titles = [s.title for s in suggestions]
        assert len(titles) == len(set(titles))
        for s in suggestions:
            has, needs = set(s.skill_gap.skills_user_has), set(s.skill_gap.skills_to_learn)
            assert has | needs == set(s.skills)
            assert not has & needs
            assert s.skill_gap.already_have + s.skill_gap.need_to_learn == s.skill_gap.total_required


def test_suggestions_get_roadmap_and_links(make_answers):
    answers = make_answers(subjects={"Math"}, interests={"Tech", "Research"})
    suggestions = build_report(answers)
    assert [s.title for s in suggestions] == ["AI Engineer", "Software Engineer"]
    ai = suggestions[0]
    assert ai.roadmap == education_roadmap("AI Engineer")
    assert ai.skill_links["Python"] == skill_link("Python")
    # Math/Tech/Research give none of the AI skills
    assert ai.skill_gap.skills_to_learn == ai.skills


def test_quiz_report_aggregates_missing_skills(make_answers):
    answers = make_answers(subjects={"Math"}, interests={"Tech", "Research", "Business"})
    report = build_quiz_report(answers)
    assert report.startup_idea.idea == "EdTech Platform for Coding Bootcamps"
    assert len(report.missing_skills) == len(set(report.missing_skills))
    for s in report.suggestions:
        assert set(s.skill_gap.skills_to_learn) <= set(report.missing_skills)


def test_resume_report_picks_frontend_template():
    report = build_resume_report("I used Python and React for this project")
    assert report.career_title == "Frontend Web Developer"
    assert report.missing_skills == ["HTML", "CSS", "Git"]
    assert [c.title for c in report.course_recommendations] == ["HTML Full Course", "Modern CSS Course"]


def test_resume_without_keywords_gets_general_template():
    report = build_resume_report("Enjoys hiking and reading novels")
    assert report.career_title == GENERAL_TEMPLATE.title
    assert report.detected_skills == []
    assert report.missing_skills == ["Programming", "Problem Solving", "Communication"]
    assert [c.platform for c in report.course_recommendations] == ["Coursera / YouTube"]


def test_template_ties_go_to_first_declared():
    assert choose_template(["Python", "Figma"]).title == "ML / Data Science Engineer"
    assert choose_template([]).title == GENERAL_TEMPLATE.title


def test_course_list_skips_duplicates():
    assert len(build_course_list(["Python", "Python"])) == 2
    assert build_course_list(["Git"]) == []


def test_serialized_report_shape(make_answers):
    payload = orjson.loads(serialize_report(build_quiz_report(make_answers())))
    assert set(payload) == {"suggestions", "missing_skills", "startup_idea"}
    assert [s["title"] for s in payload["suggestions"]] == ["General Manager", "Project Manager"]
    assert payload["startup_idea"]["idea"] == "Personalized Learning Platform"
