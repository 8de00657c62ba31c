"""
Curriculum catalog: grades, their categories, and the topics in each.

Some listed topics have no generator yet (e.g. ``g5-mul-numbers``); a session
on one of those falls back to the stub exercise.
"""

from pydantic import BaseModel


class Topic(BaseModel):
    topic_id: str
    display_name: str
    description: str = ""


class Category(BaseModel):
    name: str
    topics: list[Topic]


class Grade(BaseModel):
    grade_id: str
    label: str
    categories: list[Category]

    @property
    def topics(self) -> list[Topic]:
        return [topic for category in self.categories for topic in category.topics]


def _category(name: str, *topics: tuple[str, str, str]) -> Category:
    return Category(
        name=name,
        topics=[Topic(topic_id=t, display_name=n, description=d) for t, n, d in topics],
    )


GRADES: list[Grade] = [
    Grade(
        grade_id="1",
        label="First grade",
        categories=[
            _category(
                "A. Addition",
                ("g1-add-pictures", "Add with pictures", "Use pictures to add numbers."),
                ("g1-add-single-digit", "Add single digits", "Add two single-digit numbers."),
                ("g1-add-making-10", "Making 10", "Find the missing number to make 10."),
                ("g1-add-word", "Addition word problems", "Solve simple addition word problems."),
            ),
            _category(
                "N. Numbers",
                ("npv-number-recognition", "Number Recognition", "Identify numbers."),
                ("npv-counting-forward", "Counting Forward", "Continue the sequence."),
                ("g1-order-numbers", "Order Numbers", "Arrange numbers from least to greatest."),
                ("nl-find-integer", "Find Numbers", "Locate numbers on a number line."),
            ),
        ],
    ),
    Grade(
        grade_id="2",
        label="Second grade",
        categories=[
            _category(
                "A. Addition",
                ("g2-add-single-digit", "Add one-digit numbers", "Add single digit numbers."),
                ("g2-add-2digit-1digit", "Add 2-digit and 1-digit",
                 "Add a two-digit number and a one-digit number."),
                ("g2-add-two-2digit", "Add two 2-digit numbers", "Add two two-digit numbers."),
                ("g2-add-making-100", "Making 100", "Find the missing number to make 100."),
                ("g2-add-word", "Addition word problems", "Solve addition word problems."),
            ),
            _category(
                "C. Categorization",
                ("g2-even-odd-drag", "Sort Even and Odd", "Drag numbers to the correct group."),
                ("nl-select-odd", "Odd Numbers", "Identify odd numbers on a number line."),
                ("npv-even-odd", "Even or Odd", "Decide whether a number is even or odd."),
            ),
            _category(
                "M. Multiplication",
                ("g2-mul-tables", "Times tables", "Introduction to multiplication tables."),
                ("g2-mul-word", "Multiplication word problems", "Simple multiplication scenarios."),
            ),
            _category(
                "N. Numbers",
                ("npv-counting-backward", "Counting Backward", "Continue the sequence backward."),
                ("npv-comparing", "Comparing Numbers", "Choose <, > or =."),
                ("npv-place-value", "Place Value", "Find the value of a digit."),
                ("npv-expanded-form", "Expanded Form", "Write a number as a sum of place values."),
            ),
        ],
    ),
    Grade(
        grade_id="3",
        label="Third grade",
        categories=[
            _category(
                "M. Multiplication",
                ("g3-mul-repeated-addition", "Repeated Addition",
                 "Relate addition to multiplication."),
                ("g3-mul-tables", "Multiplication Facts", "Practice times tables up to 12."),
                ("g3-mul-numbers", "Multiply numbers", "Multiply larger numbers."),
                ("g3-mul-word", "Multiplication word problems", "Multiplication scenarios."),
                ("g3-mul-properties", "Properties",
                 "Commutative, Identity and Associative properties."),
            ),
            _category(
                "B. Addition",
                ("g3-add-3digit-3digit", "Add 3-digit numbers", "Add two 3-digit numbers."),
                ("g3-add-with-regrouping", "Add with regrouping", "Add with carrying."),
                ("g3-add-estimate", "Estimate sums", "Round and add."),
            ),
            _category(
                "O. Ordering",
                ("g3-order-decimals", "Order Decimals", "Arrange decimals from least to greatest."),
            ),
        ],
    ),
    Grade(
        grade_id="4",
        label="Fourth grade",
        categories=[
            _category(
                "M. Multiplication",
                ("g4-mul-tables", "Multiplication facts", "Master multiplication facts."),
                ("g4-mul-numbers", "Multiply 1-digit by 2-digit", "Multiply larger numbers."),
                ("g4-mul-steps", "Vertical Multiplication",
                 "Solve step-by-step multiplication problems."),
            ),
            _category(
                "B. Addition",
                ("g4-add-multi-digit", "Add multi-digit numbers",
                 "Add numbers with 4 or more digits."),
                ("g4-add-round-and-add", "Round and add", "Round each number, then add."),
            ),
            _category(
                "O. Ordering",
                ("g4-order-numbers-large", "Order Large Numbers", "Sort large numbers."),
                ("g4-order-fractions-like", "Order Fractions (Like)",
                 "Sort fractions with same denominators."),
            ),
        ],
    ),
    Grade(
        grade_id="5",
        label="Fifth grade",
        categories=[
            _category(
                "D. Decimals",
                ("g5-add-decimal", "Add decimals", "Add decimal numbers."),
            ),
            _category(
                "F. Fractions",
                ("g5-add-fractions-like", "Add fractions", "Add fractions with like denominators."),
            ),
            _category(
                "M. Multiplication",
                ("g5-mul-numbers", "Multiply multi-digit numbers", "Challenge zone multiplication."),
            ),
            _category(
                "O. Ordering",
                ("g5-order-fractions-unlike", "Order Fractions (Unlike)",
                 "Sort fractions with different denominators."),
                ("g6-order-integers", "Order Integers", "Sort positive and negative numbers."),
            ),
            _category(
                "P. Coordinate Plane",
                ("geo-plot-points", "Graph points", "Plot coordinate points on a grid."),
            ),
        ],
    ),
]


def find_topic(topic_id: str) -> Topic | None:
    for grade in GRADES:
        for topic in grade.topics:
            if topic.topic_id == topic_id:
                return topic
    return None


def all_topic_ids() -> list[str]:
    return [topic.topic_id for grade in GRADES for topic in grade.topics]
