from models.scheduling_model import ConflictType, DayOfWeek, Lesson, ScheduleConflict, TimeSlot
from typing import Callable, Dict, Iterable, List, Optional, Tuple


def find_conflict(existing: Iterable[Lesson], candidate: Lesson,
                  exclude: Optional[Lesson] = None) -> Optional[ScheduleConflict]:
    """
    Return the first stored lesson clashing with the candidate, or None.

    A lesson clashes when it sits in the same day and timeslot and shares
    either the professor or the classroom. A lesson sharing both is reported
    as a professor conflict: the professor check always runs first.
    `exclude` skips one stored record (compared by identity).
    """
    for lesson in existing:
        if lesson is exclude:
            continue
        if not lesson.same_slot(candidate):
            continue

        if lesson.professor_id == candidate.professor_id:
            return ScheduleConflict(type=ConflictType.PROFESSOR, lesson_details=lesson)
        if lesson.classroom_number == candidate.classroom_number:
            return ScheduleConflict(type=ConflictType.CLASSROOM, lesson_details=lesson)

    return None


def iter_week_slots():
    """All (day, timeslot) pairs of the week, Monday first, earliest slot first."""
    for day in DayOfWeek:
        for slot in TimeSlot:
            yield day, slot


def find_free_slots(existing: List[Lesson], lesson: Lesson,
                    exclude: Optional[Lesson] = None) -> List[Tuple[DayOfWeek, TimeSlot]]:
    """Slots where the lesson, with its professor and classroom unchanged, would not clash."""
    free = []
    for day, slot in iter_week_slots():
        moved = lesson.model_copy(update={"day_of_week": day, "time_slot": slot})
        if find_conflict(existing, moved, exclude=exclude) is None:
            free.append((day, slot))
    return free


def format_suggestions_message(free_slots: List[Tuple[DayOfWeek, TimeSlot]]) -> str:
    """Format vacant slots into a readable message."""
    if not free_slots:
        return ""

    by_day: Dict[DayOfWeek, List[str]] = {}
    for day, slot in free_slots:
        by_day.setdefault(day, []).append(slot.value)

    messages = [f"{day.value}: {', '.join(slots)}" for day, slots in by_day.items()]
    return "Available time slots: " + "; ".join(messages)


def describe_conflict(conflict: ScheduleConflict,
                      professor_name: Callable[[int], str],
                      course_name: Callable[[int], str]) -> str:
    existing = conflict.lesson_details
    when = f"{existing.day_of_week.value} {existing.time_slot.value}"

    if conflict.type == ConflictType.PROFESSOR:
        return (f"Professor Conflict: {professor_name(existing.professor_id)} already teaches "
                f"{course_name(existing.course_id)} on {when}.")
    return (f"Classroom Conflict: room {existing.classroom_number} is already occupied by "
            f"{course_name(existing.course_id)} on {when}.")
