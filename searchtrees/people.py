"""People, students and teachers that introduce themselves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


class Person:
    """Someone with a name, an age and a kind such as "Student"."""

    def __init__(self, name: str, age: int, kind: str) -> None:
        self.name = name
        self.age = age
        self.kind = kind

    def introduce(self) -> str:
        """Return a one-line self-introduction."""
        return f"Hi, I am {self.name}, and I am {self.age} years old."


class Student(Person):
    """A person with a student number."""

    def __init__(self, name: str, age: int, student_id: int) -> None:
        super().__init__(name, age, "Student")
        self.student_id = student_id

    def study(self) -> str:
        """Describe the student studying."""
        return f"{self.name} is studying."


class Teacher(Person):
    """A person who teaches a subject."""

    def __init__(self, name: str, age: int, subject: str) -> None:
        super().__init__(name, age, "Teacher")
        self.subject = subject

    def teach(self) -> str:
        """Describe the teacher teaching their subject."""
        return f"{self.name} is teaching {self.subject}."


def all_say_hi(people: Iterable[Person]) -> list[str]:
    """Return every person's introduction, in order."""
    return [person.introduce() for person in people]


def main(argv: Sequence[str] | None = None) -> int:
    """Introduce a student and a teacher, then greet them all."""
    student = Student("Alice", 16, 1001)
    teacher = Teacher("Bob", 35, "Math")
    lines = [
        student.introduce(),
        student.study(),
        student.kind,
        teacher.introduce(),
        teacher.teach(),
        teacher.kind,
        *all_say_hi([student, teacher]),
    ]
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())