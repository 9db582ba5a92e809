from models.scheduling_model import DayOfWeek, TimeSlot

SLOT_ORDER = {slot: index for index, slot in enumerate(TimeSlot)}


class ScheduleFormatter:
    """Handles transforming a schedule into JSON or printable format."""

    def __init__(self, schedule):
        self.schedule = schedule

    def _entry(self, lesson):
        return {
            "course_id": lesson.course_id,
            "course_name": self.schedule.course_display_name(lesson.course_id),
            "professor_id": lesson.professor_id,
            "professor_name": self.schedule.professor_display_name(lesson.professor_id),
            "classroom": lesson.classroom_number,
            "day": lesson.day_of_week.value,
            "time_slot": lesson.time_slot.value,
        }

    def per_day(self):
        days = {day.value: [] for day in DayOfWeek}
        for lesson in sorted(self.schedule.lessons, key=lambda l: SLOT_ORDER[l.time_slot]):
            days[lesson.day_of_week.value].append(self._entry(lesson))
        return days

    def to_json(self):
        schedule = self.schedule
        return {
            "meta": {
                "name": schedule.name,
                "days": [day.value for day in DayOfWeek],
                "time_slots": [slot.value for slot in TimeSlot],
                "professors": [p.model_dump() for p in schedule.professors],
                "classrooms": [c.model_dump() for c in schedule.classrooms],
                "courses": [c.model_dump(mode="json") for c in schedule.courses],
            },
            "lessons": [self._entry(lesson) for lesson in schedule.lessons],
            "per_day": self.per_day(),
            "utilization": {c.number: schedule.utilization(c.number) for c in schedule.classrooms},
        }

    def to_text(self):
        lines = [f"WEEKLY TIMETABLE ({self.schedule.name}):", ""]
        for day, entries in self.per_day().items():
            lines.append(day)
            if not entries:
                lines.append("  (no classes)")
            for e in entries:
                lines.append(f"  {e['time_slot']}, {e['course_name']}, Room {e['classroom']}, "
                             f"Professor: {e['professor_name']}")
            lines.append("")
        return "\n".join(lines)
