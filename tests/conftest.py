import pytest

from models.scheduling_model import Classroom, Course, CourseType, Professor
from services.schedule_service import ScheduleService


@pytest.fixture
def schedule():
    """Two professors, rooms 101/102/103 and five courses (two of them labs)."""
    s = ScheduleService("test")
    s.add_professor(Professor(id=1, name="Dr. Ivanova", department="Mathematics"))
    s.add_professor(Professor(id=2, name="Prof. Petrov", department="Physics"))
    s.add_classroom(Classroom(number="101", capacity=30, has_projector=True))
    s.add_classroom(Classroom(number="102", capacity=25, has_projector=False))
    s.add_classroom(Classroom(number="103", capacity=60, has_projector=True))
    s.add_course(Course(id=1, name="Calculus", type=CourseType.LECTURE))
    s.add_course(Course(id=2, name="Linear Algebra", type=CourseType.SEMINAR))
    s.add_course(Course(id=3, name="Mechanics", type=CourseType.LAB))
    s.add_course(Course(id=4, name="Optics", type=CourseType.PRACTICE))
    s.add_course(Course(id=5, name="Statistics", type=CourseType.LAB))
    return s
