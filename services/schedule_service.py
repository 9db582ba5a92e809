from typing import Dict, List, Optional, Tuple

from models.scheduling_model import (
    Classroom, Course, CourseType, DayOfWeek, Lesson, Professor, ScheduleConflict,
    TimeSlot, TOTAL_WEEKLY_SLOTS,
)
from services.conflict_service import describe_conflict, find_conflict, find_free_slots
from utils.logger_config import get_logger

logger = get_logger(__name__)


class NotFoundError(LookupError):
    """A professor, classroom, course or lesson is not registered."""


class DuplicateEntryError(ValueError):
    """An identifier is already registered."""


class ScheduleService:
    """
    One weekly schedule: the professor, classroom and course registries plus
    the insertion-ordered list of lessons.

    Every mutation goes through validate() first, so no two stored lessons
    ever share (day, timeslot, professor) or (day, timeslot, classroom).
    Lessons are identified by course_id; the first match wins.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._professors: Dict[int, Professor] = {}
        self._classrooms: Dict[str, Classroom] = {}
        self._courses: Dict[int, Course] = {}
        self._lessons: List[Lesson] = []

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------
    def add_professor(self, professor: Professor) -> None:
        if professor.id in self._professors:
            raise DuplicateEntryError(f"Professor {professor.id} is already registered")
        self._professors[professor.id] = professor

    def add_classroom(self, classroom: Classroom) -> None:
        if classroom.number in self._classrooms:
            raise DuplicateEntryError(f"Classroom {classroom.number} is already registered")
        self._classrooms[classroom.number] = classroom

    def add_course(self, course: Course) -> None:
        if course.id in self._courses:
            raise DuplicateEntryError(f"Course {course.id} is already registered")
        self._courses[course.id] = course

    def get_professor(self, professor_id: int) -> Professor:
        try:
            return self._professors[professor_id]
        except KeyError:
            raise NotFoundError(f"Professor {professor_id} not found") from None

    def get_classroom(self, number: str) -> Classroom:
        try:
            return self._classrooms[number]
        except KeyError:
            raise NotFoundError(f"Classroom {number} not found") from None

    def get_course(self, course_id: int) -> Course:
        try:
            return self._courses[course_id]
        except KeyError:
            raise NotFoundError(f"Course {course_id} not found") from None

    def get_lesson(self, course_id: int) -> Lesson:
        lesson = self._find_lesson(course_id)
        if lesson is None:
            raise NotFoundError(f"No lesson scheduled for course {course_id}")
        return lesson

    def check_references(self, lesson: Lesson) -> None:
        """Raise NotFoundError for the first unknown entity the lesson refers to."""
        self.get_professor(lesson.professor_id)
        self.get_classroom(lesson.classroom_number)
        self.get_course(lesson.course_id)

    @property
    def professors(self) -> List[Professor]:
        return list(self._professors.values())

    @property
    def classrooms(self) -> List[Classroom]:
        return list(self._classrooms.values())

    @property
    def courses(self) -> List[Course]:
        return list(self._courses.values())

    @property
    def lessons(self) -> Tuple[Lesson, ...]:
        return tuple(self._lessons)

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def validate(self, candidate: Lesson) -> Optional[ScheduleConflict]:
        return find_conflict(self._lessons, candidate)

    def add_lesson(self, lesson: Lesson) -> bool:
        conflict = self.validate(lesson)
        if conflict is not None:
            logger.info(
                "[%s] Rejected course %s on %s %s: %s with course %s",
                self.name, lesson.course_id, lesson.day_of_week.value, lesson.time_slot.value,
                conflict.type.value, conflict.lesson_details.course_id,
            )
            return False

        self._lessons.append(lesson)
        logger.info(
            "[%s] Scheduled course %s in room %s on %s %s",
            self.name, lesson.course_id, lesson.classroom_number,
            lesson.day_of_week.value, lesson.time_slot.value,
        )
        return True

    def reassign_classroom(self, course_id: int, new_classroom_number: str) -> bool:
        """
        Move the first lesson of the course to another room in the same slot.

        The lesson's own record is left out of the clash check, so moving a
        lesson to the room it already has succeeds and changes nothing.
        """
        lesson = self._find_lesson(course_id)
        if lesson is None:
            logger.debug("[%s] Reassign: no lesson for course %s", self.name, course_id)
            return False

        candidate = lesson.model_copy(update={"classroom_number": new_classroom_number})
        # The lesson's own record shares its slot and professor; leave it out of the scan.
        conflict = find_conflict(self._lessons, candidate, exclude=lesson)
        if conflict is not None:
            logger.info(
                "[%s] Cannot move course %s to room %s: %s with course %s",
                self.name, course_id, new_classroom_number,
                conflict.type.value, conflict.lesson_details.course_id,
            )
            return False

        old_number = lesson.classroom_number
        lesson.classroom_number = new_classroom_number
        logger.info("[%s] Moved course %s from room %s to %s",
                    self.name, course_id, old_number, new_classroom_number)
        return True

    def cancel(self, course_id: int) -> None:
        lesson = self._find_lesson(course_id)
        if lesson is None:
            return
        self._lessons.remove(lesson)
        logger.info("[%s] Cancelled course %s", self.name, course_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def lessons_at(self, day: DayOfWeek, time_slot: TimeSlot) -> List[Lesson]:
        return [l for l in self._lessons if l.day_of_week == day and l.time_slot == time_slot]

    def find_free_classrooms(self, day: DayOfWeek, time_slot: TimeSlot) -> List[str]:
        occupied = {l.classroom_number for l in self.lessons_at(day, time_slot)}
        return [number for number in self._classrooms if number not in occupied]

    def lessons_for_professor(self, professor_id: int) -> List[Lesson]:
        return [l for l in self._lessons if l.professor_id == professor_id]

    def utilization(self, classroom_number: str) -> float:
        """Percentage of the 25 weekly slots in which the room holds a lesson."""
        occupied = sum(1 for l in self._lessons if l.classroom_number == classroom_number)
        return occupied * 100 / TOTAL_WEEKLY_SLOTS

    def most_popular_course_type(self) -> CourseType:
        """
        Course type with the most scheduled lessons.

        Ties go to the type declared first in CourseType (Lecture, Seminar,
        Lab, Practice), so an empty schedule yields Lecture. Lessons whose
        course is not registered are left out of the tally.
        """
        counts = {course_type: 0 for course_type in CourseType}
        for lesson in self._lessons:
            course = self._courses.get(lesson.course_id)
            if course is None:
                logger.warning("[%s] Lesson refers to unknown course %s; not counted",
                               self.name, lesson.course_id)
                continue
            counts[course.type] += 1

        best = CourseType.LECTURE
        for course_type in CourseType:
            # strict comparison keeps the earlier type on a tie
            if counts[course_type] > counts[best]:
                best = course_type
        return best

    def find_free_slots(self, lesson: Lesson) -> List[Tuple[DayOfWeek, TimeSlot]]:
        """Slots where the lesson could go instead, keeping its professor and room."""
        stored = next((l for l in self._lessons if l is lesson), None)
        return find_free_slots(self._lessons, lesson, exclude=stored)

    def describe_conflict(self, conflict: ScheduleConflict) -> str:
        return describe_conflict(conflict, self.professor_display_name, self.course_display_name)

    def professor_display_name(self, professor_id: int) -> str:
        professor = self._professors.get(professor_id)
        return professor.name if professor else f"Professor {professor_id}"

    def course_display_name(self, course_id: int) -> str:
        course = self._courses.get(course_id)
        return course.name if course else f"Course {course_id}"

    def _find_lesson(self, course_id: int) -> Optional[Lesson]:
        return next((l for l in self._lessons if l.course_id == course_id), None)


class ScheduleBook:
    """Independent schedules by name, e.g. one per semester."""

    def __init__(self):
        self._schedules: Dict[str, ScheduleService] = {}

    def get_or_create(self, name: str) -> ScheduleService:
        if name not in self._schedules:
            self._schedules[name] = ScheduleService(name)
            logger.info("Created schedule %s", name)
        return self._schedules[name]

    def get(self, name: str) -> ScheduleService:
        try:
            return self._schedules[name]
        except KeyError:
            raise NotFoundError(f"Schedule {name} not found") from None

    def names(self) -> List[str]:
        return list(self._schedules)

    def drop(self, name: str) -> None:
        self._schedules.pop(name, None)
