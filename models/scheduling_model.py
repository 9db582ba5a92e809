from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"


class TimeSlot(str, Enum):
    FIRST = "8:30-10:00"
    SECOND = "10:15-11:45"
    THIRD = "12:15-13:45"
    FOURTH = "14:00-15:30"
    FIFTH = "15:45-17:15"


class CourseType(str, Enum):
    # Declaration order doubles as the popularity tie-break order.
    LECTURE = "Lecture"
    SEMINAR = "Seminar"
    LAB = "Lab"
    PRACTICE = "Practice"


class ConflictType(str, Enum):
    PROFESSOR = "ProfessorConflict"
    CLASSROOM = "ClassroomConflict"


# 5 weekdays x 5 timeslots
TOTAL_WEEKLY_SLOTS = 25


class Professor(BaseModel):
    id: int
    name: str
    department: str


class Classroom(BaseModel):
    number: str
    capacity: int
    has_projector: bool = False


class Course(BaseModel):
    id: int
    name: str
    type: CourseType


class Lesson(BaseModel):
    course_id: int
    professor_id: int
    classroom_number: str
    day_of_week: DayOfWeek
    time_slot: TimeSlot

    def same_slot(self, other: "Lesson") -> bool:
        return self.day_of_week == other.day_of_week and self.time_slot == other.time_slot


class ScheduleConflict(BaseModel):
    type: ConflictType
    lesson_details: Lesson


class SeedData(BaseModel):
    professors: List[Professor] = Field(default_factory=list)
    classrooms: List[Classroom] = Field(default_factory=list)
    courses: List[Course] = Field(default_factory=list)
    lessons: List[Lesson] = Field(default_factory=list)


class ReassignRequest(BaseModel):
    classroom_number: str


class ConflictReport(BaseModel):
    conflict: bool
    type: Optional[ConflictType] = None
    message: str
    suggestions: str = ""
    conflicting_lesson: Optional[Lesson] = None
