from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse

from models.scheduling_model import (
    Classroom, ConflictReport, Course, DayOfWeek, Lesson, Professor, ReassignRequest,
    SeedData, TimeSlot,
)
from services.conflict_service import format_suggestions_message
from services.schedule_service import DuplicateEntryError, NotFoundError, ScheduleBook, ScheduleService
from validator import SeedValidator
from formatter import ScheduleFormatter
from utils.logger_config import get_logger

logger = get_logger(__name__)

# Handlers and dependencies are async so every request runs on the event loop
# thread; schedule creation and validate-then-mutate sequences never interleave.
router = APIRouter(prefix="/schedules/{name}")


async def get_book(request: Request) -> ScheduleBook:
    return request.app.state.schedules


async def get_schedule(name: str, book: ScheduleBook = Depends(get_book)) -> ScheduleService:
    return book.get_or_create(name)


def conflict_report(schedule: ScheduleService, lesson: Lesson) -> ConflictReport:
    conflict = schedule.validate(lesson)
    if conflict is None:
        return ConflictReport(conflict=False, message="No conflicts detected.")

    return ConflictReport(
        conflict=True,
        type=conflict.type,
        message=schedule.describe_conflict(conflict),
        suggestions=format_suggestions_message(schedule.find_free_slots(lesson)),
        conflicting_lesson=conflict.lesson_details,
    )


def _register(add, entry):
    try:
        add(entry)
    except DuplicateEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return entry


@router.post("/seed")
async def seed_schedule(seed: SeedData, schedule: ScheduleService = Depends(get_schedule)):
    """
    Register professors, classrooms and courses in one go, then schedule
    the given lessons in order. Lessons that clash are reported, not added.
    """
    validator = SeedValidator(
        seed,
        known_professors=[p.id for p in schedule.professors],
        known_classrooms=[c.number for c in schedule.classrooms],
        known_courses=[c.id for c in schedule.courses],
    )
    errors = validator.validate()
    if errors:
        raise HTTPException(status_code=400, detail=errors)

    for professor in seed.professors:
        schedule.add_professor(professor)
    for classroom in seed.classrooms:
        schedule.add_classroom(classroom)
    for course in seed.courses:
        schedule.add_course(course)

    rejected = []
    for lesson in seed.lessons:
        report = conflict_report(schedule, lesson)
        if report.conflict:
            rejected.append({"lesson": lesson, "reason": report.message})
        else:
            schedule.add_lesson(lesson)

    logger.info("Seeded schedule %s: %d lessons added, %d rejected",
                schedule.name, len(seed.lessons) - len(rejected), len(rejected))
    return {
        "professors": len(seed.professors),
        "classrooms": len(seed.classrooms),
        "courses": len(seed.courses),
        "lessons_added": len(seed.lessons) - len(rejected),
        "rejected": rejected,
    }


@router.post("/professors", status_code=201)
async def add_professor(professor: Professor, schedule: ScheduleService = Depends(get_schedule)):
    return _register(schedule.add_professor, professor)


@router.post("/classrooms", status_code=201)
async def add_classroom(classroom: Classroom, schedule: ScheduleService = Depends(get_schedule)):
    return _register(schedule.add_classroom, classroom)


@router.post("/courses", status_code=201)
async def add_course(course: Course, schedule: ScheduleService = Depends(get_schedule)):
    return _register(schedule.add_course, course)


@router.post("/lessons", status_code=201)
async def add_lesson(lesson: Lesson, schedule: ScheduleService = Depends(get_schedule)):
    try:
        schedule.check_references(lesson)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    report = conflict_report(schedule, lesson)
    if report.conflict:
        raise HTTPException(status_code=409, detail=report.model_dump(mode="json"))

    schedule.add_lesson(lesson)
    return lesson


@router.post("/lessons/validate", response_model=ConflictReport)
async def validate_lesson(lesson: Lesson, schedule: ScheduleService = Depends(get_schedule)):
    """Conflict check for a proposed lesson; nothing is stored."""
    return conflict_report(schedule, lesson)


@router.put("/lessons/{course_id}/classroom")
async def reassign_classroom(course_id: int, body: ReassignRequest,
                             schedule: ScheduleService = Depends(get_schedule)):
    try:
        lesson = schedule.get_lesson(course_id)
        schedule.get_classroom(body.classroom_number)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if not schedule.reassign_classroom(course_id, body.classroom_number):
        raise HTTPException(status_code=409, detail={
            "conflict": True,
            "message": f"Room {body.classroom_number} is not free on "
                       f"{lesson.day_of_week.value} {lesson.time_slot.value}.",
            "free_classrooms": schedule.find_free_classrooms(lesson.day_of_week, lesson.time_slot),
        })
    return lesson


@router.delete("/lessons/{course_id}", status_code=204)
async def cancel_lesson(course_id: int, schedule: ScheduleService = Depends(get_schedule)):
    schedule.cancel(course_id)
    return Response(status_code=204)


@router.get("/free-classrooms")
async def free_classrooms(day: DayOfWeek, time_slot: TimeSlot,
                          schedule: ScheduleService = Depends(get_schedule)):
    return {
        "day": day.value,
        "time_slot": time_slot.value,
        "classrooms": schedule.find_free_classrooms(day, time_slot),
    }


@router.get("/professors/{professor_id}/lessons")
async def professor_lessons(professor_id: int, schedule: ScheduleService = Depends(get_schedule)):
    try:
        schedule.get_professor(professor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"professor_id": professor_id, "lessons": schedule.lessons_for_professor(professor_id)}


@router.get("/classrooms/{number}/utilization")
async def classroom_utilization(number: str, schedule: ScheduleService = Depends(get_schedule)):
    try:
        schedule.get_classroom(number)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"classroom": number, "utilization": schedule.utilization(number)}


@router.get("/popular-course-type")
async def popular_course_type(schedule: ScheduleService = Depends(get_schedule)):
    return {"course_type": schedule.most_popular_course_type()}


@router.get("/timetable")
async def timetable(fmt: str = Query("json", alias="format"), schedule: ScheduleService = Depends(get_schedule)):
    formatter = ScheduleFormatter(schedule)
    if fmt == "text":
        return PlainTextResponse(formatter.to_text())
    if fmt != "json":
        raise HTTPException(status_code=400, detail=f"Unknown format {fmt!r}; use json or text.")
    return formatter.to_json()
