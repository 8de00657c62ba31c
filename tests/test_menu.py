"""Unit tests for the curriculum catalog and topic selection menu."""

import pytest

from curriculum import GRADES, Category, Grade, Topic, all_topic_ids, find_topic
from menu import TopicSelectionMenu


@pytest.fixture
def small_grade() -> Grade:
    """A grade mixing generated topics and one without a generator."""
    return Grade(
        grade_id="9",
        label="Test grade",
        categories=[
            Category(
                name="A. Mixed",
                topics=[
                    Topic(topic_id="g1-order-numbers", display_name="Order Numbers"),
                    Topic(topic_id="future-topic", display_name="Coming Later"),
                ],
            ),
            Category(
                name="B. Points",
                topics=[Topic(topic_id="geo-plot-points", display_name="Graph points")],
            ),
        ],
    )


@pytest.fixture
def menu(small_grade, registry) -> TopicSelectionMenu:
    return TopicSelectionMenu(grades=[small_grade], registry=registry)


class TestCurriculum:
    def test_grades_one_to_five(self):
        assert [g.grade_id for g in GRADES] == ["1", "2", "3", "4", "5"]

    def test_topic_ids_are_unique(self):
        ids = all_topic_ids()
        assert len(ids) == len(set(ids))

    def test_find_topic(self):
        assert find_topic("g4-mul-steps").display_name == "Vertical Multiplication"
        assert find_topic("missing") is None

    def test_almost_every_topic_has_a_generator(self, registry):
        missing = [t for t in all_topic_ids() if t not in registry]
        assert missing == ["g5-mul-numbers"]


class TestTopicSelectionMenu:
    def test_get_topics_flattens_categories(self, menu):
        ids = [t.topic_id for t in menu.get_topics("9")]
        assert ids == ["g1-order-numbers", "future-topic", "geo-plot-points"]

    def test_unknown_grade(self, menu):
        assert menu.get_grade("0") is None
        assert menu.get_topics("0") == []
        assert menu.get_grade_progress("0") == 0.0

    def test_availability_includes_aliases(self, menu):
        topics = menu.get_topics("9")
        assert [menu.is_available(t) for t in topics] == [True, False, True]

    def test_grade_progress(self, menu):
        assert menu.get_grade_progress("9") == pytest.approx(2 / 3)

    def test_select_by_number_and_id(self, menu):
        assert menu.select("9", "2").topic_id == "future-topic"
        assert menu.select("9", " geo-plot-points ").topic_id == "geo-plot-points"
        assert menu.select("9", "4") is None
        assert menu.select("9", "0") is None
        assert menu.select("9", "nope") is None

    def test_display_menu_marks_missing_generators(self, menu, capsys):
        topics = menu.display_menu("9")
        out = capsys.readouterr().out
        assert len(topics) == 3
        assert "1. Order Numbers" in out
        assert "2. Coming Later (coming soon)" in out
        assert "A. Mixed" in out

    def test_display_menu_unknown_grade(self, menu, capsys):
        assert menu.display_menu("0") == []
        assert "No grade '0'" in capsys.readouterr().out
