from formatter import ScheduleFormatter
from models.scheduling_model import DayOfWeek, TimeSlot
from factories import make_lesson


class TestScheduleFormatter:

    def test_to_json_structure(self, schedule):
        schedule.add_lesson(make_lesson(1, slot=TimeSlot.THIRD))
        schedule.add_lesson(make_lesson(2, professor_id=2, room="102", slot=TimeSlot.FIRST))

        result = ScheduleFormatter(schedule).to_json()

        assert result["meta"]["name"] == "test"
        assert result["meta"]["days"] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
        assert len(result["meta"]["time_slots"]) == 5
        assert [e["course_id"] for e in result["lessons"]] == [1, 2]
        # per-day view is ordered by timeslot, not insertion
        assert [e["course_id"] for e in result["per_day"]["Monday"]] == [2, 1]
        assert result["per_day"]["Friday"] == []
        assert result["utilization"] == {"101": 4.0, "102": 4.0, "103": 0.0}

    def test_entry_carries_names(self, schedule):
        schedule.add_lesson(make_lesson(1))

        entry = ScheduleFormatter(schedule).to_json()["lessons"][0]

        assert entry == {
            "course_id": 1,
            "course_name": "Calculus",
            "professor_id": 1,
            "professor_name": "Dr. Ivanova",
            "classroom": "101",
            "day": "Monday",
            "time_slot": "8:30-10:00",
        }

    def test_unknown_names_fall_back_to_ids(self, schedule):
        schedule.add_lesson(make_lesson(77, professor_id=9))

        entry = ScheduleFormatter(schedule).to_json()["lessons"][0]

        assert entry["course_name"] == "Course 77"
        assert entry["professor_name"] == "Professor 9"

    def test_to_text(self, schedule):
        schedule.add_lesson(make_lesson(3, professor_id=2, room="103", day=DayOfWeek.WEDNESDAY,
                                        slot=TimeSlot.FOURTH))

        text = ScheduleFormatter(schedule).to_text()

        assert text.startswith("WEEKLY TIMETABLE (test):")
        assert "Wednesday\n  14:00-15:30, Mechanics, Room 103, Professor: Prof. Petrov" in text
        assert text.count("(no classes)") == 4
