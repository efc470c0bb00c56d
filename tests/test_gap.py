from career_engine.gap import analyze_gap, known_skills
from career_engine.taxonomy import CAREER_SKILLS


def test_known_skills_union_over_tags(make_answers):
    answers = make_answers(subjects={"Math"}, hobbies={"Coding"})
    assert known_skills(answers) == {
        "Problem Solving", "Data Analysis", "Algorithms", "Programming", "Data Structures",
    }


def test_unknown_tags_contribute_nothing(make_answers):
    assert known_skills(make_answers(hobbies={"Sports", "Music"})) == frozenset()


def test_partition_keeps_required_order(make_answers):
    required = list(CAREER_SKILLS["Software Engineer"])
    gap = analyze_gap(known_skills(make_answers(subjects={"Math"})), required)
    assert gap.skills_user_has == ["Problem Solving", "Algorithms"]
    assert gap.skills_to_learn == ["Programming", "Data Structures"]
    assert (gap.total_required, gap.already_have, gap.need_to_learn) == (4, 2, 2)


def test_empty_required():
    gap = analyze_gap({"Python"}, [])
    assert gap.skills_user_has == [] and gap.skills_to_learn == []
    assert gap.total_required == 0
