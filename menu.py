"""
Topic Selection Menu module for student-driven topic selection.

This module lists the curriculum's grades and topics and marks which topics
the registry can generate exercises for.
"""

from curriculum import GRADES, Grade, Topic
from exercises.registry import TopicRegistry, get_default_registry


class TopicSelectionMenu:
    """Generates and manages the topic selection menu from the curriculum."""

    def __init__(
        self,
        grades: list[Grade] | None = None,
        registry: TopicRegistry | None = None,
    ):
        self.grades = grades if grades is not None else GRADES
        self.registry = registry or get_default_registry()

    def get_grade(self, grade_id: str) -> Grade | None:
        return next((g for g in self.grades if g.grade_id == grade_id), None)

    def is_available(self, topic: Topic) -> bool:
        """Check if the registry can generate exercises for a topic."""
        return topic.topic_id in self.registry

    def get_topics(self, grade_id: str) -> list[Topic]:
        """All topics for a grade, in display order."""
        grade = self.get_grade(grade_id)
        return grade.topics if grade else []

    def get_grade_progress(self, grade_id: str) -> float:
        """Fraction of a grade's topics that have a generator."""
        topics = self.get_topics(grade_id)
        if not topics:
            return 0.0
        return sum(1 for t in topics if self.is_available(t)) / len(topics)

    def select(self, grade_id: str, choice: str) -> Topic | None:
        """Resolve a 1-based menu number (or a topic id) to a topic."""
        topics = self.get_topics(grade_id)
        choice = choice.strip()
        if choice.isdigit():
            index = int(choice) - 1
            return topics[index] if 0 <= index < len(topics) else None
        return next((t for t in topics if t.topic_id == choice), None)

    def display_menu(self, grade_id: str) -> list[Topic]:
        """
        Print the topic selection menu to stdout.

        Returns the grade's topics (in display order).
        """
        grade = self.get_grade(grade_id)

        print("\n" + "=" * 60)
        print("TOPIC SELECTION MENU")
        print("=" * 60)

        if grade is None:
            print(f"No grade {grade_id!r}. Choose one of: "
                  + ", ".join(g.grade_id for g in self.grades))
            return []

        print(f"{grade.label}")
        number = 1
        for category in grade.categories:
            print(f"\n{category.name}")
            for topic in category.topics:
                marker = "" if self.is_available(topic) else " (coming soon)"
                print(f"  {number}. {topic.display_name}{marker}")
                print(f"     {topic.description}")
                number += 1

        print("\n" + "-" * 60)
        return grade.topics
