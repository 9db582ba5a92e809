from collections import Counter

from models.scheduling_model import SeedData


class SeedValidator:
    """Handles all pre-checks before a seed payload is registered."""

    def __init__(self, seed: SeedData, known_professors=(), known_classrooms=(), known_courses=()):
        self.seed = seed
        # ids already registered in the target schedule
        self.known_professors = set(known_professors)
        self.known_classrooms = set(known_classrooms)
        self.known_courses = set(known_courses)

    def validate(self):
        errors = []
        seed = self.seed

        # Duplicate identifiers inside the payload
        for pid, count in Counter(p.id for p in seed.professors).items():
            if count > 1:
                errors.append(f"Professor id {pid} appears {count} times.")
        for number, count in Counter(c.number for c in seed.classrooms).items():
            if count > 1:
                errors.append(f"Classroom {number} appears {count} times.")
        for cid, count in Counter(c.id for c in seed.courses).items():
            if count > 1:
                errors.append(f"Course id {cid} appears {count} times.")

        # Clashes with what is already registered
        for p in seed.professors:
            if p.id in self.known_professors:
                errors.append(f"Professor id {p.id} is already registered.")
        for c in seed.classrooms:
            if c.number in self.known_classrooms:
                errors.append(f"Classroom {c.number} is already registered.")
        for c in seed.courses:
            if c.id in self.known_courses:
                errors.append(f"Course id {c.id} is already registered.")

        for c in seed.classrooms:
            if c.capacity <= 0:
                errors.append(f"Classroom {c.number} has capacity {c.capacity}; it must be positive.")

        # Lesson references
        professor_ids = self.known_professors | {p.id for p in seed.professors}
        classroom_numbers = self.known_classrooms | {c.number for c in seed.classrooms}
        course_ids = self.known_courses | {c.id for c in seed.courses}
        for lesson in seed.lessons:
            if lesson.professor_id not in professor_ids:
                errors.append(f"Lesson for course {lesson.course_id} refers to unknown professor {lesson.professor_id}.")
            if lesson.classroom_number not in classroom_numbers:
                errors.append(f"Lesson for course {lesson.course_id} refers to unknown classroom {lesson.classroom_number}.")
            if lesson.course_id not in course_ids:
                errors.append(f"Lesson refers to unknown course {lesson.course_id}.")

        return errors
